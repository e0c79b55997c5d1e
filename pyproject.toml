[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcbasetools"
version = "1.0.0"
description = "Small building blocks: linked lists, linear and piecewise mappers, colors, a polled timer, running averages, a text ring buffer and string helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "timer",
    "linked list",
    "stack",
    "queue",
    "interpolation",
    "piecewise linear",
    "running average",
    "ring buffer",
    "color",
    "rgb565",
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lcbasetools"]

[tool.hatch.build.targets.sdist]
include = ["lcbasetools", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
