[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cafrecord"
version = "0.1.0"
description = "Data model for the records of common analysis files in short-baseline neutrino experiments"
requires-python = ">=3.10"
dependencies = []
keywords = ["neutrino", "physics", "analysis", "records", "caf", "lartpc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cafrecord"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
