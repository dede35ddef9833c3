[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tyconia"
version = "0.1.0"
description = "Game rules for an isometric restaurant tycoon: mod packs, research conditions, tile maps, inventories, UI actions and game states"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tycoon", "simulation", "isometric", "tilemap", "modding", "inventory"]
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
    "Topic :: Games/Entertainment :: Simulation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tyconia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
