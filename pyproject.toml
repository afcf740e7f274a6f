[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cratekit"
version = "0.1.0"
description = "Boolean and cfg expressions, sorted vector maps and sets, checked numeric casts, a code emitter and small concurrency helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "boolean-logic",
    "cfg",
    "parser",
    "sorted-map",
    "sorted-set",
    "numeric-cast",
    "code-generation",
    "waitgroup",
    "async-stream",
    "fair-mutex",
]
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
    "Framework :: AsyncIO",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["cratekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
