[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zogpy"
version = "0.1.0"
description = "Schema-based parsing and validation of untyped data with coercion, transforms and localized error messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["validation", "schema", "parsing", "coercion", "forms", "i18n"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zogpy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
