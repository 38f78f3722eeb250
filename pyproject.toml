[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnd-monsters"
version = "0.1.0"
description = "Track monsters in a tabletop role-playing encounter: roll hit points, apply damage and healing, and view stat blocks."
requires-python = ">=3.10"
dependencies = []
keywords = ["dnd", "dungeons-and-dragons", "encounter", "monsters", "tabletop", "rpg"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dnd-monsters = "dnd_monsters.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dnd_monsters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
