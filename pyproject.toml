[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fusio"
version = "0.1.0"
description = "Async file interfaces with an in-memory object-store backend and Parquet footer reader and writer adaptors"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "object-store", "async", "io", "parquet"]
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
    "Framework :: AsyncIO",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["fusio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
