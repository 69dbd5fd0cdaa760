[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shitris"
version = "0.1.0"
description = "Game logic for a falling-block puzzle with boards and pieces defined in text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "tetromino", "falling blocks", "board"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shitris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
