[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "pairstorm"
version = "0.1.0"
description = "Chat, user presence and SQLite storage core for a pair-programming editor, with class scaffolding helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "pair-programming", "sqlite", "code-generation", "observer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Communications :: Chat",
    "Topic :: Database",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["pairstorm*"]

[tool.pytest.ini_options]
addopts = "-ra"
