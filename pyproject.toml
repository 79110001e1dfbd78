[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sessreplay"
version = "0.1.0"
description = "Record a command's output with timing data and replay it later"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "session", "recording", "scriptreplay", "timing", "replay"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sessreplay-recorder = "sessreplay.recorder_cli:main"
sessreplay-player = "sessreplay.player_cli:main"
sessreplay = "sessreplay.replay_cli:main"
sessreplay-example = "sessreplay.example:main"

[tool.hatch.build.targets.wheel]
packages = ["sessreplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
