[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonnetkit"
version = "0.1.0"
description = "Building blocks of a Jsonnet interpreter: source locations, fodder, identifier sets, operators and standard-library functions"
requires-python = ">=3.10"
keywords = ["jsonnet", "interpreter", "configuration", "json", "toml", "yaml"]
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
    "Topic :: Software Development :: Interpreters",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["jsonnetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
