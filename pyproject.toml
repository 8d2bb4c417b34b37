[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bikefix"
version = "0.1.0"
description = "Host-side model of a cellular bike tracker: pin maps, peripheral and modem enums, CRC, and GPS/cell position filtering"
requires-python = ">=3.10"
dependencies = []
keywords = ["gps", "tracker", "gsm", "modem", "crc", "embedded", "nmea", "sms"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bikefix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
