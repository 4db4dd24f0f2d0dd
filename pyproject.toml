[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventofcode"
version = "0.1.0"
description = "Solutions to a series of daily programming puzzles, importable day by day"
requires-python = ">=3.10"
keywords = ["puzzles", "advent", "algorithms", "graphs", "geometry"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adventofcode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
