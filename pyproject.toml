[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leetkit"
version = "0.1.0"
description = "Solutions to classic algorithm puzzles, small data structures and a task scaffolding command"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "puzzles", "interview", "cache"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leetkit-new = "leetkit.scaffold:main"

[tool.hatch.build.targets.wheel]
packages = ["leetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
