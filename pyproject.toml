[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbasics"
version = "0.1.0"
description = "Small classic programming exercises: number checks, string helpers, conversions, searching and sorting"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "algorithms", "sorting", "searching", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cbasics = "cbasics.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cbasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
