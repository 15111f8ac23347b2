[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "langtour"
version = "0.1.0"
description = "Runnable demos and small helpers covering classic algorithms, collections, slice-style helpers and thread-based concurrency."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "algorithms", "collections", "concurrency", "examples"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
langtour-algorithms = "langtour.algorithms:main"
langtour-fundamentals = "langtour.fundamentals:main"
langtour-ownership = "langtour.ownership:main"
langtour-catalog = "langtour.catalog:main"
langtour-concurrency = "langtour.concurrency:main"

[tool.hatch.build.targets.wheel]
packages = ["langtour"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
