[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flagvalues"
version = "0.1.0"
description = "Typed command-line flag values: integers, strings, lists, maps, IP addresses, masks and networks"
requires-python = ">=3.10"
dependencies = []
keywords = ["flags", "command-line", "options", "parsing", "ip", "cidr", "csv"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flagvalues"]

[tool.pytest.ini_options]
addopts = "-ra"
