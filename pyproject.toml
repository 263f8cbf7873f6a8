[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nwcmul"
version = "0.1.0"
description = "Exact polynomial and large-integer multiplication via negatively wrapped convolutions over Z[x]/(x^2m + 1)"
requires-python = ">=3.10"
dependencies = []
keywords = ["convolution", "polynomial", "fft", "ntt", "negacyclic", "multiplication"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nwcmul"]

[tool.pytest.ini_options]
addopts = "-ra"
