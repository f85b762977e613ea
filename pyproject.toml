[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bullethell"
version = "0.1.0"
description = "A small top-down arcade game with a moving player, an animated sprite and a draining health bar"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "bullet-hell", "arcade", "pygame", "shmup"]
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bullethell = "bullethell.window:main"

[tool.hatch.build.targets.wheel]
packages = ["bullethell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
