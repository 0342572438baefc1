[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyraycaster"
version = "0.1.0"
description = "A small software raycaster with a top-down map, textured walls and billboard sprites"
requires-python = ">=3.10"
keywords = ["raycaster", "raycasting", "game", "pygame", "software-rendering", "fps"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tinyraycaster = "tinyraycaster.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyraycaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
