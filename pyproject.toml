[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snowcalc"
version = "0.1.0"
description = "Solvers for a December series of calendar puzzles: calibration values, cube games, engine schematics, scratchcards, almanacs, boat races, camel cards, desert maps, sensor histories and spring records."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "calendar", "solver", "algorithms"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snowcalc-day01 = "snowcalc.day01:main"
snowcalc-day02 = "snowcalc.day02:main"
snowcalc-day03 = "snowcalc.day03:main"
snowcalc-day04 = "snowcalc.day04:main"
snowcalc-day05 = "snowcalc.day05:main"
snowcalc-day06 = "snowcalc.day06:main"
snowcalc-day07 = "snowcalc.day07:main"
snowcalc-day08 = "snowcalc.day08:main"
snowcalc-day09 = "snowcalc.day09:main"
snowcalc-day12-arrangements = "snowcalc.day12_arrangements:main"
snowcalc-day12-constellations = "snowcalc.day12_constellations:main"
snowcalc-day12-first-fit = "snowcalc.day12_first_fit:main"
snowcalc-triangles = "snowcalc.triangles:main"

[tool.hatch.build.targets.wheel]
packages = ["snowcalc"]

[tool.pytest.ini_options]
addopts = "-ra"
