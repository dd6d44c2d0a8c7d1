[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stormphrax"
version = "0.1.0"
description = "Building blocks of a UCI chess engine: transposition table, WDL model, tunable search parameters and UCI command parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "uci", "engine", "transposition-table", "wdl", "tuning"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stormphrax"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
