[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wardsys"
version = "0.1.0"
description = "Hospital records in Python: people, rooms, schedules, procedures, inventory, bills and patient profiles."
requires-python = ">=3.10"
dependencies = []
keywords = ["hospital", "management", "inventory", "scheduling", "billing"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wardsys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
