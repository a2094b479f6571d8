[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miniredis"
version = "0.1.0"
description = "Redis-style value types, hash, list and sorted-set commands over an in-memory keyspace, and a RESP command-line client"
requires-python = ">=3.10"
dependencies = []
keywords = ["redis", "key-value", "in-memory", "resp", "sorted-set", "quicklist"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
miniredis-cli = "miniredis.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["miniredis"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
