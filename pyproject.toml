[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "courselib"
version = "0.1.0"
description = "Teaching helpers: queues, priority queues, lexicons, string utilities, console input, geometry types and a reproducible random generator."
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "priority-queue", "lexicon", "dawg", "strings", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
packages = ["courselib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
