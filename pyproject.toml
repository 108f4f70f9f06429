[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dirtree"
version = "0.1.0"
description = "An interactive in-memory directory tree shell with level-order search and size totals"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "directory", "shell", "data-structures", "level-order"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dirtree = "dirtree.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["dirtree"]

[tool.pytest.ini_options]
addopts = "-ra"
