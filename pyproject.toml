[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "libstock"
version = "0.1.0"
description = "Menu-driven library stock keeper: products, books, categories, suppliers, users and transactions in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "library", "stock", "suppliers", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
libstock = "libstock.cli:main"
libstock-catalog = "libstock.cli:catalog_main"

[tool.setuptools.packages.find]
include = ["libstock*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
