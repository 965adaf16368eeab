import pytest

from cryptolab.despermute import (
    initial_permutation,
    initial_permutation_inverse,
    main,
)

SAMPLE_BLOCKS = [
    0,
    1,
    0x0123456789ABCDEF,
    0xFFFFFFFFFFFFFFFF,
    0x8000000000000000,
    0xDEADBEEFCAFEBABE,
]


def test_known_permutation_of_standard_example():
    assert initial_permutation(0x0123456789ABCDEF) == 0xCC00CCFFF0AAF0AA


@pytest.mark.parametrize("block", SAMPLE_BLOCKS)
def test_inverse_undoes_permutation(block):
    assert initial_permutation_inverse(initial_permutation(block)) == block


@pytest.mark.parametrize("block", SAMPLE_BLOCKS)
def test_permutation_undoes_inverse(block):
    assert initial_permutation(initial_permutation_inverse(block)) == block


@pytest.mark.parametrize("block", SAMPLE_BLOCKS)
def test_bit_count_is_preserved(block):
    assert bin(initial_permutation(block)).count("1") == bin(block).count("1")


def test_first_output_bit_comes_from_input_bit_58():
    block = 1 << (64 - 58)
    assert initial_permutation(block) == 1 << 63


def test_permutation_is_a_bijection_on_single_bits():
    images = {initial_permutation(1 << shift) for shift in range(64)}
    assert len(images) == 64
    assert all(bin(image).count("1") == 1 for image in images)


@pytest.mark.parametrize("block", [-1, 1 << 64])
def test_out_of_range_block_rejected(block):
    with pytest.raises(ValueError):
        initial_permutation(block)
    with pytest.raises(ValueError):
        initial_permutation_inverse(block)


def test_main_default_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Original Plaintext: 0123456789ABCDEF"
    assert lines[1] == f"After Initial Permutation: {initial_permutation(0x0123456789ABCDEF):016X}"
    assert lines[2] == "After Initial Permutation Inverse: 0123456789ABCDEF"


def test_main_with_block_argument(capsys):
    assert main(["FF"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Original Plaintext: 00000000000000FF"
    assert lines[2] == "After Initial Permutation Inverse: 00000000000000FF"