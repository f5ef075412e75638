[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tournie"
version = "0.1.0"
description = "Button-driven terminal menu for Melee tournament setups: SD card checks and Smashscope launching"
requires-python = ">=3.10"
keywords = ["melee", "tournament", "slippi", "dolphin", "terminal", "gpio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "blessed",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tournie = "tournie.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tournie"]

[tool.pytest.ini_options]
addopts = "-ra"
