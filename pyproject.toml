[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ptv2routes"
version = "0.0.1"
description = "In-memory feature layers for PTv2 public transport route relations and their validation errors"
requires-python = ">=3.10"
dependencies = []
keywords = ["openstreetmap", "osm", "public transport", "ptv2", "routes", "validation", "gis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["ptv2routes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
