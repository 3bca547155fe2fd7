[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazechase"
version = "0.1.0"
description = "A maze chase arcade game: eat stars and fruit, dodge ghosts, climb the high-score table."
requires-python = ">=3.10"
keywords = ["game", "arcade", "maze", "pygame", "ghosts"]
classifiers = [
    "Development Status :: 4 - Beta",
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
mazechase = "mazechase.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mazechase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
