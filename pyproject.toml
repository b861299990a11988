[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdf2d"
version = "0.1.0"
description = "A small 2D frame-by-frame animation starter: raster frames, onion skinning, PNG export and a simple scene format."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["animation", "2d", "raster", "onion-skin", "png", "frames"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sdf2d = "sdf2d.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sdf2d"]

[tool.pytest.ini_options]
addopts = "-ra"
