[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leetsolve"
version = "0.1.0"
description = "Compact solutions to classic array, string, stack, queue and heap puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "interview", "puzzles", "arrays", "stacks", "heaps"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["leetsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
