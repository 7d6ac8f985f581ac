[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidesolve"
version = "0.1.0"
description = "Optimal A* solver for N x M sliding tile puzzles, with single-tile and block-shift move rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "sliding-puzzle", "15-puzzle", "8-puzzle", "a-star", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slidesolve = "slidesolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["slidesolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
