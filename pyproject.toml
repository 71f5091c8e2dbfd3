[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamekit"
version = "0.1.0"
description = "Small building blocks for 2D games: vectors, rectangles, colours, easing, vertex meshes, input state, timers and JSON-backed settings."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "vector", "easing", "ring buffer", "input", "geometry", "timer"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["gamekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
