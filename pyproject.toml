[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knightdrag"
version = "0.1.0"
description = "A small desktop board where a single knight can be dragged from square to square."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "knight", "drag-and-drop", "board", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
knightdrag = "knightdrag.app:main"

[tool.hatch.build.targets.wheel]
packages = ["knightdrag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
