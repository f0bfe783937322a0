[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "blobarena"
version = "0.1.0"
description = "Movement rules and drawing geometry for a top-down blob arena: player, enemies, traps, a jumbo roamer and a camera"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "blob", "arena", "simulation"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["blobarena*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
