[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ll1kit"
version = "0.1.0"
description = "Table-driven lexical scanner and LL(1) toolkit: FIRST and FOLLOW sets, predictive parse tables and a predictive parser"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ll1",
    "parser",
    "predictive-parsing",
    "first-follow",
    "scanner",
    "lexer",
    "compiler",
    "grammar",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ll1kit = "ll1kit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ll1kit"]

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
strict = true
