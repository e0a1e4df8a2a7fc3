[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gorillas"
version = "0.1.0"
description = "Two-player banana-throwing artillery game drawn on a 128x64 monochrome framebuffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "artillery", "gorillas", "turn-based", "framebuffer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gorillas = "gorillas.game:main"

[tool.hatch.build.targets.wheel]
packages = ["gorillas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
