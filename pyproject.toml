[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threadsums"
version = "0.1.0"
description = "Threaded array summing and a backtracking sudoku solver run over several grids at once"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "backtracking", "threads", "concurrency", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
threadsums-calculator = "threadsums.calculator:main"
threadsums-sudoku = "threadsums.sudoku_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["threadsums"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
