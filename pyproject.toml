[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spatgris-control"
version = "0.1.0"
description = "Trajectories, source snapshots and strongly typed angles for multi-source sound spatialization control"
requires-python = ">=3.10"
dependencies = []
keywords = ["spatialization", "audio", "trajectory", "sound", "panning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spatgris_control"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
