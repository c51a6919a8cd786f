[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "sclp"
version = "0.1.0"
description = "Three-address code, function signatures and MIPS assembly statements for a small compiler back end"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "three-address code", "mips", "spim", "code generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["sclp*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
