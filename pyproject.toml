[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flappy"
version = "0.1.0"
description = "A side-scrolling Flappy Bird game with a headless game model and a pygame front end"
requires-python = ">=3.10"
keywords = ["game", "flappy-bird", "arcade", "pygame"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
flappy = "flappy.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["flappy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
