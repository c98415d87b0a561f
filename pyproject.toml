[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kmdiff"
version = "0.1.0"
description = "Building blocks for differential k-mer analysis between control and case cohorts"
requires-python = ">=3.10"
dependencies = []
keywords = ["k-mer", "genomics", "gwas", "bioinformatics", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: POSIX",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kmdiff"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
