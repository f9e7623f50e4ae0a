[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sszkit"
version = "0.1.0"
description = "SimpleSerialize (SSZ) encoding, decoding and merkleization of typed values"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssz", "simpleserialize", "serialization", "merkle", "hash-tree-root"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sszkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
