[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ogbcore"
version = "0.1.9"
description = "Core utilities for small game and tool code: strings, paths, printf-style formatting, logging, random numbers, vector arithmetic and threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamedev", "strings", "formatting", "logging", "lcg", "vectors", "threads", "utilities"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ogbcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
