[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qsnake"
version = "0.1.0"
description = "A snake game played by a Q-learning agent on a 16x14 board, logging frames to text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "q-learning", "reinforcement-learning", "game", "agent"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qsnake = "qsnake.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qsnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
