[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zcore"
version = "0.1.0"
description = "Small building blocks: collections, JSON5/CSV parsers, timers, processor topology and child processes"
requires-python = ">=3.10"
dependencies = []
keywords = ["json5", "csv", "ring-buffer", "linked-list", "timer", "subprocess", "alignment"]
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
packages = ["zcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
