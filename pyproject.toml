[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netimp"
version = "0.1.0"
description = "Terminal front-end for searching, watching and downloading YouTube videos with yt-dlp and mpv"
requires-python = ">=3.10"
keywords = ["youtube", "terminal", "tui", "curses", "yt-dlp", "mpv", "video"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Display",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
netimp = "netimp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["netimp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
