[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motorwatch"
version = "0.1.0"
description = "Building blocks for electric-motor condition monitoring: accelerometer access, 1-Wire CRC-8, shaft speed, mains power and model format words"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "condition-monitoring",
    "predictive-maintenance",
    "adxl345",
    "accelerometer",
    "crc8",
    "tachometer",
    "rms",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["motorwatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
