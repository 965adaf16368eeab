import io

import pytest

from cryptolab.railfence import encrypt, main


def test_classic_example_three_rails():
    assert encrypt("WEAREDISCOVEREDFLEEATONCE", 3) == "WECRLTEERDSOEEFEAOCAIVDEN"


def test_two_rails_alternate():
    assert encrypt("abcdef", 2) == "acebdf"


def test_single_rail_is_identity():
    assert encrypt("hello world", 1) == "hello world"


def test_depth_at_least_length_is_identity():
    assert encrypt("abcd", 4) == "abcd"
    assert encrypt("abcd", 10) == "abcd"


def test_empty_message():
    assert encrypt("", 3) == ""


@pytest.mark.parametrize("depth", [1, 2, 3, 4, 7])
def test_result_is_a_permutation_of_the_message(depth):
    message = "THE QUICK BROWN FOX"
    result = encrypt(message, depth)
    assert sorted(result) == sorted(message)


def test_first_character_stays_first():
    assert encrypt("zyxwvut", 3)[0] == "z"


def test_placeholder_characters_are_dropped():
    assert encrypt("a0b", 2) == "ab"
    assert "0" not in encrypt("10203", 3)


@pytest.mark.parametrize("depth", [0, -2])
def test_invalid_depth_rejected(depth):
    with pytest.raises(ValueError):
        encrypt("abc", depth)


def test_main_with_arguments(capsys):
    assert main(["abcdef", "2"]) == 0
    assert capsys.readouterr().out == "encrypted message:acebdf\n"


def test_main_prompts_for_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abcdef\n2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("enter the message:")
    assert "\n enter depth:" in out
    assert out.endswith("encrypted message:acebdf\n")