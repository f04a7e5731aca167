[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planeshapes"
version = "0.1.0"
description = "Circles, squares and triangles in the plane: measures, moves, resizing and outline points"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "shapes", "circle", "square", "triangle", "plane"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["planeshapes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
