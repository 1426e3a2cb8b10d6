[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparrow"
version = "0.1.0"
description = "Sparrow in Kyiv: a side-scrolling flapping-bird arcade game with difficulty levels and a local leaderboard"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "flappy", "leaderboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sparrow = "sparrow.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sparrow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
