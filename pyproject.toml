[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickout"
version = "0.1.0"
description = "A terminal brick-breaking game drawn with ANSI escape sequences"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "breakout", "terminal", "ansi", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
brickout = "brickout.game:main"

[tool.hatch.build.targets.wheel]
packages = ["brickout"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
