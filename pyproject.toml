[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sctui"
version = "0.1.0"
description = "A SoundCloud client for the terminal"
requires-python = ">=3.10"
keywords = ["soundcloud", "terminal", "tui", "music", "curses"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
sctui = "sctui.tui:main"

[tool.hatch.build.targets.wheel]
packages = ["sctui"]

[tool.pytest.ini_options]
addopts = "-ra"
