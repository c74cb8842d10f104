[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcurve"
version = "0.1.0"
description = "Parameter handling and numerical helpers for binary-star light-curve models"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "binary stars", "light curve", "eclipsing binaries", "limb darkening"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lcurve"]

[tool.pytest.ini_options]
addopts = "-ra"
