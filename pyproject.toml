[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solong_map"
version = "0.1.0"
description = "Reader and validator for tile maps of a collect-and-exit puzzle game, with small string and formatting helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tile map", "map validation", "puzzle", "game map"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
solong-map = "solong_map.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["solong_map"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
