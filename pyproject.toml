[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "detectivequest"
version = "1.0.0"
description = "A terminal detective game: explore a mansion, collect clues and accuse a suspect."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text-adventure", "detective", "binary-tree", "terminal"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
detectivequest-novato = "detectivequest.novato:main"
detectivequest-aventureiro = "detectivequest.aventureiro:main"
detectivequest-mestre = "detectivequest.mestre:main"

[tool.hatch.build.targets.wheel]
packages = ["detectivequest"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
