[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dfalex"
version = "0.1.0"
description = "Circular-buffer source filter and table-driven DFAs that recognise assignment targets and reserved words"
requires-python = ">=3.10"
dependencies = []
keywords = ["dfa", "lexer", "automaton", "circular buffer", "ring buffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dfalex = "dfalex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dfalex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
