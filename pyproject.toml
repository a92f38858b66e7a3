[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qolkit"
version = "0.1.21"
description = "Small quality-of-life helpers for mappings, sequences and nested maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "collections", "mapping", "helpers", "nested-dict"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
