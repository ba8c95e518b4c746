[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sosyalag"
version = "0.1.0"
description = "Social network analysis on a red-black tree: friend search, communities, influence scores and Graphviz output"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "social network",
    "graph",
    "red-black tree",
    "community detection",
    "influence",
    "graphviz",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Turkish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sosyalag = "sosyalag.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sosyalag"]

[tool.pytest.ini_options]
addopts = "-ra"
