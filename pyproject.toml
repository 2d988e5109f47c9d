[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wolfpix"
version = "0.1.0"
description = "XPM image decoding, X11 colour names, classic string helpers and pointer-driven view controls"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "pixmap", "image", "x11", "colors", "raycaster", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wolfpix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
