[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textops"
version = "0.1.0"
description = "Interactive menu of string operations on a text buffer: replace, find, remove, insert, copy, reverse, case conversion and file save/load"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "text", "editing", "interactive", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
textops = "textops.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["textops"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
