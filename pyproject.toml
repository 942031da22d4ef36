[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsontree"
version = "1.7.16"
description = "A mutable JSON document tree: build, query, edit, copy and compare JSON values in memory"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "tree", "document", "compare"]
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
    "Topic :: File Formats :: JSON",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsontree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
