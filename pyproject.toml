[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httptypes"
version = "0.1.0"
description = "HTTP protocol types: versions, dates, transfer encodings and connection upgrades"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "transfer-encoding", "te", "http-date", "upgrade"]
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
    "Framework :: AsyncIO",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["httptypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
