[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsol"
version = "0.1.0"
description = "Load, normalise and link programs written as JSON documents"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "linker", "ir", "scripting"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jsol = "jsol.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jsol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
