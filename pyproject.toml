[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gglib"
version = "0.1.0"
description = "Everyday helpers for sequences, values, JSON and pseudo-random numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sequence", "list", "utilities", "functional", "json", "random"]
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
packages = ["gglib"]

[tool.pytest.ini_options]
addopts = "-ra"
