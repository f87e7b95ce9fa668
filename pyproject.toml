[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinylove"
version = "0.0.1"
description = "Building blocks for a small software-rendered game runtime with a LÖVE-style API: bitmaps, painter, fonts, mouse, timer, random numbers and game archives."
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "software-rendering", "love2d", "retro"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tinylove"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
