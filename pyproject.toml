[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kdcluster"
version = "0.0.1"
description = "DBSCAN clustering backed by a k-d tree with pluggable distance and coordinate access"
requires-python = ">=3.10"
dependencies = []
keywords = ["dbscan", "clustering", "kd-tree", "nearest-neighbour", "radius-search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
kdcluster-demo = "kdcluster.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["kdcluster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
