[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tickschedule"
version = "0.1.0"
description = "A tick-driven cooperative task scheduler with software timeouts and a finite-state-machine base"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduler", "embedded", "timer", "timeout", "state machine", "cooperative"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tickschedule"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
