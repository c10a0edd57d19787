[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rgbdtrack"
version = "0.1.0"
description = "Building blocks for multi-person visual tracking: Kalman-smoothed tracks, histogram features, detection association and image channel filters"
requires-python = ">=3.10"
keywords = ["tracking", "people", "kalman", "histogram", "computer-vision", "natural-sort"]
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
    "Topic :: Scientific/Engineering :: Image Recognition",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["rgbdtrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
