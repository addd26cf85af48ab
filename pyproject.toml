[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wolfmaze"
version = "1.0.0"
description = "A small tile-based maze game: collect every item, then reach the exit."
requires-python = ">=3.10"
keywords = ["game", "maze", "puzzle", "tiles", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
wolfmaze = "wolfmaze.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wolfmaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
