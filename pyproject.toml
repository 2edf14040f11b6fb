[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aggressive-squares"
version = "0.1.0"
description = "A side-scrolling zombie shooter with a boss battle, built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "zombies", "side-scroller", "shooter", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aggressive-squares = "aggressive_squares.app:main"

[tool.hatch.build.targets.wheel]
packages = ["aggressive_squares"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
