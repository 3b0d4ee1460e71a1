[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgpcore"
version = "0.1.0"
description = "Core building blocks for OpenPGP: algorithm identifiers, hashing, checksums, AES key wrap, RSA PKCS#1 v1.5, OpenPGP CFB encryption and line handling."
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["openpgp", "pgp", "cryptography", "cfb", "aes-key-wrap", "checksum", "twofish"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pgpcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
