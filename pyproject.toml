[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelfall"
version = "0.1.0"
description = "A small tile-based platformer: collect every coin, then reach the exit"
requires-python = ">=3.10"
keywords = ["game", "platformer", "tiles", "pygame", "ber", "level"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelfall = "pixelfall.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelfall"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
