[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtcommon"
version = "0.1.0"
description = "Common runtime helpers: error codes, path and string utilities, embedded resource archives, tasks and synchronisation primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["paths", "wildcard", "resources", "archive", "tasks", "synchronization", "semaphore", "mutex", "error codes"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtcommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
