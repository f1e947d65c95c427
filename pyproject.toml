[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frontierbfs"
version = "0.1.0"
description = "Top-down, bottom-up and hybrid breadth-first search over compressed adjacency graphs, with graph file tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "breadth-first search", "csr", "adjacency"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphtools = "frontierbfs.tools:main"

[tool.hatch.build.targets.wheel]
packages = ["frontierbfs"]

[tool.pytest.ini_options]
addopts = "-ra"
