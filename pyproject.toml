[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handmath"
version = "0.1.0"
description = "Elementary math functions computed from series, iteration and bisection in pure Python"
requires-python = ">=3.10"
keywords = ["math", "series", "taylor", "bisection", "trigonometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["handmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
