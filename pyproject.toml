[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubcast"
version = "0.1.0"
description = "A grid-based DDA raycaster that loads .cub level files and shows a first-person wall view with a minimap."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["raycasting", "dda", "game", "first-person", "minimap", "level-parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubcast = "cubcast.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cubcast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
