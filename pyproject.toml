[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxwriter"
version = "0.1.9"
description = "A simple writer for the MagicaVoxel .vox file format"
requires-python = ">=3.10"
dependencies = []
keywords = ["vox", "magicavoxel", "3d", "voxel", "file", "writer"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
voxwriter-samples = "voxwriter.samples:main"

[tool.hatch.build.targets.wheel]
packages = ["voxwriter"]

[tool.pytest.ini_options]
addopts = "-ra"
