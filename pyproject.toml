[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thetachart"
version = "0.1.0"
description = "Map number, label and time series onto Cartesian and polar chart coordinates"
requires-python = ">=3.10"
dependencies = []
keywords = ["chart", "plot", "axes", "scale", "svg", "visualization"]
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
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["thetachart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
