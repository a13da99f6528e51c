[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bankthreads"
version = "0.1.0"
description = "Thread-safety demonstrations: racing bank clients, lock-protected balances and deadlock-free transfers"
requires-python = ">=3.10"
dependencies = []
keywords = ["threading", "race condition", "mutex", "deadlock", "concurrency", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankthreads = "bankthreads.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bankthreads"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
