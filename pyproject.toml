[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stx"
version = "1.0.0"
description = "Result values holding Ok or Err, panics for unrecoverable failures, and UTF-8 sequence helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["result", "error-handling", "panic", "ok", "err", "utf-8"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["stx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
