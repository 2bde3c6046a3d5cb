[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stockroom"
version = "0.1.0"
description = "A small JSON HTTP service for tracking products, their sources and sales transactions in memory."
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["inventory", "stock", "products", "rest", "json", "http", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stockroom = "stockroom.app:main"

[tool.hatch.build.targets.wheel]
packages = ["stockroom"]

[tool.pytest.ini_options]
addopts = "-ra"
