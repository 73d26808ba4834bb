[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easyenv"
version = "0.1.0"
description = "Terminal tool for grouping environment variables into named collections and writing them to .env files"
requires-python = ">=3.10"
dependencies = []
keywords = ["env", "dotenv", "environment", "variables", "terminal", "curses", "symlink"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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
easyenv = "easyenv.app:main"

[tool.hatch.build.targets.wheel]
packages = ["easyenv"]

[tool.pytest.ini_options]
addopts = "-ra"
