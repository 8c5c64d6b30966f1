[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cub"
version = "0.1.0"
description = "Small building blocks: a fixed-capacity hash map, a linked list, fixed-size containers, optional values, console logging and range helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "hashmap", "linked list", "logging", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cub"]

[tool.pytest.ini_options]
addopts = "-ra"
