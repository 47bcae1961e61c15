[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobasis"
version = "0.1.0"
description = "Classic algorithms and data structures: sorting, searching, heaps, trees, union-find, graphs and small puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "binary-search",
    "binary-search-tree",
    "heap",
    "union-find",
    "graph",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algobasis-bench = "algobasis.bench:main"
algobasis-cat = "algobasis.iostreams:main"

[tool.hatch.build.targets.wheel]
packages = ["algobasis"]

[tool.pytest.ini_options]
addopts = "-ra"
