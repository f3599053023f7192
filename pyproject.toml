[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paganini"
version = "0.1.0"
description = "A small entity-component game engine with an OpenGL renderer, input state tracking and file helpers"
requires-python = ">=3.10"
keywords = ["game engine", "entity component system", "opengl", "pyglet", "rendering", "input"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pyglet",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
paganini = "paganini.main:main"

[tool.hatch.build.targets.wheel]
packages = ["paganini"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
