[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zenta"
version = "0.1.0"
description = "Mindfulness for terminal users: guided breathing and end-of-day reflection"
requires-python = ">=3.10"
dependencies = []
keywords = ["mindfulness", "breathing", "meditation", "reflection", "terminal", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zenta = "zenta.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zenta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
