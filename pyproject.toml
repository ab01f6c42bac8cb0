[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sighook"
version = "0.3.18"
description = "Structured Unix signal handling: several independent actions per signal, signal names and default-handler emulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["signal", "unix", "daemon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sighook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
