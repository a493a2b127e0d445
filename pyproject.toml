[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exactalign"
version = "1.2.0"
description = "Exact alignment of generated genetic patterns against a generated nucleotide sequence"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "sequence alignment",
    "exact matching",
    "dna",
    "nucleotides",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
exactalign = "exactalign.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exactalign"]

[tool.hatch.build.targets.sdist]
include = [
    "exactalign",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["exactalign"]
