[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airspace3d"
version = "0.1.0"
description = "Airspace survey route planning, OBJ model loading and flight simulation state"
requires-python = ">=3.10"
dependencies = []
keywords = ["airspace", "route planning", "convex hull", "obj", "flight simulation", "gis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["airspace3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
