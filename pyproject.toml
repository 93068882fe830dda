[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sorcery"
version = "0.1.0"
description = "A two-player, turn-based collectible card game played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "turn-based", "terminal", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sorcery = "sorcery.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sorcery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
