[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc25"
version = "0.1.0"
description = "Solutions and helpers for the 2025 Advent of Code puzzles"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "grid", "matrix"]
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
dependencies = [
    "requests",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
aoc25 = "aoc25.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc25"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
