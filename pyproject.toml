[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacmaze"
version = "0.1.0"
description = "A small maze-chomping arcade game built on pygame"
requires-python = ">=3.10"
keywords = ["game", "arcade", "maze", "pygame"]
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
pacmaze = "pacmaze.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pacmaze"]

[tool.pytest.ini_options]
addopts = "-ra"
