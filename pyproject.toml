[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arosbot"
version = "0.1.0"
description = "A chat bot with a hangman game and a calculator, plus console hangman and an addition quiz"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["hangman", "telegram", "bot", "calculator", "quiz", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arosbot = "arosbot.bot:main"
arosbot-hangman = "arosbot.console:main"
arosbot-quiz = "arosbot.quiz:main"

[tool.hatch.build.targets.wheel]
packages = ["arosbot"]

[tool.pytest.ini_options]
addopts = "-ra"
