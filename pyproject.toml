[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "georays"
version = "0.1.0"
description = "Level format, editor logic and player physics for a side-scrolling platformer"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "level-editor", "physics", "side-scroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["georays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
