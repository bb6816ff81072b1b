[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafolab"
version = "0.1.0"
description = "Load, inspect and analyse small graphs with single-character vertex ids: closures, shortest paths, spanning trees and eccentricity measures."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "dijkstra",
    "floyd",
    "prim",
    "kruskal",
    "dfs",
    "transitive closure",
    "eccentricity",
    "articulation points",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grafolab = "grafolab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grafolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
