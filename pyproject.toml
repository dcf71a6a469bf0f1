[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linereader"
version = "0.1.0"
description = "Read lines one at a time from file descriptors using a fixed-size read buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["readline", "file descriptor", "buffer", "lines"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linereader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
