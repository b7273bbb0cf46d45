[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tdas"
version = "0.1.0"
description = "Classic abstract data types (stack, queue, linked list, heap, hash table, binary search tree) and a web log analyzer with DoS detection"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "stack",
    "queue",
    "linked list",
    "heap",
    "hash table",
    "binary search tree",
    "log analysis",
]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tdas"]

[tool.pytest.ini_options]
addopts = "-ra"
