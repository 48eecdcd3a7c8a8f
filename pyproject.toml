[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcfkit"
version = "0.1.0"
description = "Building blocks for reading and writing RPG Maker 2000/2003 LCF data records"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "lcf", "rpg-maker", "game-data", "binary-format"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lcfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
