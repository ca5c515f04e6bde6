[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "magmavoxel"
version = "0.1.0"
description = "A small voxel sandbox shooter: Perlin terrain, a fly camera and projectiles that break blocks"
requires-python = ">=3.10"
keywords = ["voxel", "game", "opengl", "perlin", "terrain", "shooter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
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
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
magmavoxel = "magmavoxel.app:main"

[tool.hatch.build.targets.wheel]
packages = ["magmavoxel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
