[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "tapasmaraton"
version = "0.1.0"
description = "Greedy selection of tapas bars and series episodes within a time budget"
requires-python = ">=3.10"
dependencies = []
keywords = ["greedy", "merge sort", "scheduling", "tapas", "series", "time budget"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tapasmaraton = "tapasmaraton.cli:main"

[tool.setuptools]
packages = ["tapasmaraton"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
