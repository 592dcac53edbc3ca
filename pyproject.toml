[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filekit"
version = "0.1.0"
description = "Small file utilities: copying files and trees, line-oriented text files, a timestamped log book and a TCP file transfer."
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "copy", "directory", "log", "tcp", "transfer"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filekit = "filekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
