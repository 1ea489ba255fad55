[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "powietrze"
version = "0.1.0"
description = "Client and reporting helpers for the GIOŚ air quality measurement service"
requires-python = ">=3.10"
dependencies = []
keywords = ["air quality", "gios", "pollution", "measurements", "sensors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["powietrze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
