[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drirecord"
version = "0.1.0"
description = "Decoding of Datex-Ohmeda Record Interface (DRI) physiological data, with protocol constants and serial port selection"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["dri", "datex-ohmeda", "patient monitor", "physiological data", "waveforms", "serial"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Healthcare Industry",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["drirecord"]

[tool.pytest.ini_options]
addopts = "-ra"
