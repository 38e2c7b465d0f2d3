[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "binarybrain"
version = "0.1.0"
description = "A small binary spiking network with XNOR-popcount forward passes, reward bits and bit-flip plasticity"
requires-python = ">=3.10"
dependencies = []
keywords = ["spiking", "binary neural network", "plasticity", "xnor", "popcount", "reward"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["binarybrain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
