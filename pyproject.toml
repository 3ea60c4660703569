[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holdem"
version = "0.1.0"
description = "Texas Hold'em poker played at the terminal, with a poker hand evaluator"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "texas holdem", "cards", "game", "hand evaluator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
holdem = "holdem.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["holdem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
