[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sc2bot"
version = "0.1.0"
description = "Building blocks for StarCraft II bots: API transport, client launching, unit counting, map grids and expansions."
requires-python = ">=3.10"
keywords = ["starcraft", "sc2", "bot", "game-ai", "rts"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "websocket-client",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sc2bot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
