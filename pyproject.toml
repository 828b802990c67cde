[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agsteer"
version = "0.1.0"
description = "Building blocks for agricultural autosteer controllers: NMEA sentence parsing, running averages, CAN frames and ADS1115 ADC access."
requires-python = ">=3.10"
dependencies = []
keywords = ["nmea", "gps", "autosteer", "can", "ads1115", "running-average", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["agsteer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
