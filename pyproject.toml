[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamebreaker"
version = "0.1.0"
description = "A small 2D game toolkit on pygame: drawing through a view, sprites, input state, text files, INI settings and lists"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "pygame", "sprites", "2d", "input", "ini"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gamebreaker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
