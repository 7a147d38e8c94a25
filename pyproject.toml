[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubray"
version = "0.1.0"
description = "A small grid-based raycasting engine that loads .cub scene files and renders textured walls"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "cub", "maze", "pygame", "first-person"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubray = "cubray.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
