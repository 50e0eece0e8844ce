[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utilbox"
version = "0.1.0"
description = "General-purpose helpers: JSON inspection, predicates, macro expansion, sampling, secrets and replayable command sessions"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "json", "predicates", "macro", "sampling", "replay"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["utilbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
