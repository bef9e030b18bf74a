[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lineeditor"
version = "0.4.0"
description = "A rich line editor for the terminal with highlighting, hints, auto pairs, selection and completion"
requires-python = ">=3.10"
dependencies = []
keywords = ["line-editor", "cli", "terminal", "readline", "rich-editor", "gitql"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lineeditor-gitql = "lineeditor.gitql:main"

[tool.hatch.build.targets.wheel]
packages = ["lineeditor"]

[tool.hatch.build.targets.sdist]
include = ["lineeditor", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
