[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iso8583"
version = "0.1.0"
description = "Building blocks for ISO 8583 financial messages: length prefixes, padding, BCD, tag sorting and network length headers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "iso8583",
    "payments",
    "card",
    "financial",
    "bcd",
    "ebcdic",
    "ber-tlv",
    "protocol",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iso8583"]

[tool.hatch.build.targets.sdist]
include = ["iso8583", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
