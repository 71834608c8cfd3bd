[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gogame"
version = "0.1.0"
description = "Play the game of Go in the terminal against a simple computer opponent"
requires-python = ">=3.10"
dependencies = []
keywords = ["go", "baduk", "weiqi", "board game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
gogame = "gogame.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gogame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
