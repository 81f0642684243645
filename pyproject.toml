[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doot"
version = "0.1.0"
description = "A rotating four-dimensional tesseract drawn with a small 2D OpenGL line renderer"
requires-python = ">=3.10"
keywords = ["opengl", "tesseract", "4d", "rendering", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
doot = "doot.app:main"

[tool.hatch.build.targets.wheel]
packages = ["doot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
