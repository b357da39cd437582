[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blastgrid"
version = "0.1.0"
description = "A small grid arcade game: drop explosions, clear destructible blocks and stop falling enemies."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "bomber", "grid"]
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
blastgrid = "blastgrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["blastgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
