[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evilpixie"
version = "0.3.1"
description = "Building blocks for a pixel-art paint program: geometry, colour ranges, sprite sheets and Scale2x."
requires-python = ">=3.10"
dependencies = []
keywords = ["pixel-art", "paint", "sprites", "sprite-sheet", "scale2x", "palette"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["evilpixie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
