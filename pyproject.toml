[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trafficctl"
version = "2.2.2"
description = "Traffic-light controller logic: time handling, serial framing, GPS time sync, EEPROM storage and mode watchdogs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "traffic-light",
    "controller",
    "serial-protocol",
    "eeprom",
    "rtc",
    "i2c",
    "nmea",
    "gps",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trafficctl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
