[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ltlr"
version = "0.1.0"
description = "Core game logic for a side-scrolling platformer: input bindings, input recording and replays, scoring and entity management"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "replay", "input", "entity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ltlr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
