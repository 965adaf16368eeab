[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptolab"
version = "0.1.0"
description = "Small educational cryptography routines: DES initial permutation, MD5, SHA-1, rail fence cipher and textbook RSA."
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "md5", "sha1", "rsa", "des", "rail-fence", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptolab-des-permute = "cryptolab.despermute:main"
cryptolab-md5 = "cryptolab.md5hash:main"
cryptolab-railfence = "cryptolab.railfence:main"
cryptolab-rsa = "cryptolab.toyrsa:main"
cryptolab-sha1 = "cryptolab.sha1:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
