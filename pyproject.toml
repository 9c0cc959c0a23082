[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "ftkit"
version = "0.1.0"
description = "Small string, memory, list, formatting and line-reading helpers with exact, well-defined edge-case behaviour"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "printf", "linked list", "line reader", "bytearray", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["ftkit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
