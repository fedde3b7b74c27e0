[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meeus"
version = "0.1.0"
description = "Algorithms from Meeus's Astronomical Algorithms: Easter dates, coordinate transformations, angular separation, lunar apsides, planetary magnitudes and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "astronomy",
    "coordinates",
    "angular separation",
    "easter",
    "delta t",
    "meeus",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meeus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
