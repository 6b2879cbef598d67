[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dominionsim"
version = "0.1.0"
description = "A simulator of the Dominion deck-building card game with a buying bot, a scripted match and an interactive console."
requires-python = ">=3.10"
dependencies = []
keywords = ["dominion", "card game", "deck building", "simulation", "board game", "lehmer", "random"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
dominion-play = "dominionsim.playdom:main"
dominion-player = "dominionsim.player:main"
dominion-rt = "dominionsim.rt:main"

[tool.hatch.build.targets.wheel]
packages = ["dominionsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
