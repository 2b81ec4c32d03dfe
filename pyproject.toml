[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "onetimepad"
version = "1.0.0"
description = "One-time pad key generator with encryption and decryption servers and clients over TCP"
requires-python = ">=3.10"
dependencies = []
keywords = ["one-time pad", "cipher", "encryption", "socket", "server", "client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
onetimepad-keygen = "onetimepad.keygen:main"
onetimepad-enc-server = "onetimepad.server:enc_main"
onetimepad-dec-server = "onetimepad.server:dec_main"
onetimepad-enc-client = "onetimepad.client:enc_main"
onetimepad-dec-client = "onetimepad.client:dec_main"

[tool.hatch.build.targets.wheel]
packages = ["onetimepad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
