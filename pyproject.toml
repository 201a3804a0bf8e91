[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacedefender"
version = "0.1.0"
description = "A small arcade shooter: defend the ground from descending enemy waves."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame", "space"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spacedefender = "spacedefender.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spacedefender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
