[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wdfunpack"
version = "0.1.0"
description = "Read WDF archives and extract files listed in .lst name lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["wdf", "archive", "unpacker", "extract", "game-data"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wdfunpack = "wdfunpack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wdfunpack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
