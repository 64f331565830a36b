[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexabank"
version = "0.1.0"
description = "Payment, fraud-check and notification services built around ports and adapters"
requires-python = ">=3.10"
keywords = ["payments", "fraud", "notifications", "hexagonal", "ports-and-adapters", "flask"]
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
    "Framework :: Flask",
    "Topic :: Office/Business :: Financial",
]
dependencies = [
    "flask>=2.2",
    "requests>=2.25",
    "sqlalchemy>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["hexabank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
