[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonparse"
version = "0.1.0"
description = "A small JSON parser made of one parsing function per value kind, with a command-line validator"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "parser", "validator"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jsonparse = "jsonparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jsonparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
