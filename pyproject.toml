[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patchwork"
version = "0.1.0"
description = "B-spline and Bezier bases, tensor-product sampling patterns and analytic test surfaces for parametric surface patches"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "bspline",
    "bezier",
    "blossom",
    "de-casteljau",
    "de-boor",
    "sampling",
    "surfaces",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["patchwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
