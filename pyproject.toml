[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boardkit"
version = "0.1.0"
description = "Board data model, convex hull and bounding-box geometry, and file and user-directory helpers for circuit board viewers"
requires-python = ">=3.10"
dependencies = []
keywords = ["pcb", "boardview", "convex hull", "bounding box", "geometry", "eda"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boardkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
