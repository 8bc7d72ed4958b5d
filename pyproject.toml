[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uwuspeak"
version = "0.1.0"
description = "Deterministic, configurable conversion of text into uwu speak"
requires-python = ">=3.10"
dependencies = []
keywords = ["uwu", "text", "transform", "fun", "filter"]
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
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uwuspeak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
