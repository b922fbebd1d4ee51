[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treeguide"
version = "0.1.0"
description = "Binary trees, binary search trees, a tree-backed set, traversal iterators and a stack"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "binary search tree", "bst", "tree set", "iterator", "stack", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["treeguide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
