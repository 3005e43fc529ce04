[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deemak"
version = "0.1.0"
description = "A text adventure shell for exploring a directory-based world, in a window or through a web backend"
requires-python = ">=3.10"
keywords = ["shell", "text-adventure", "game", "exploration", "pygame", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
deemak = "deemak.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["deemak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
