[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kromozom"
version = "0.1.0"
description = "A small chromosome simulator: crossover, mutation and a summary of gene sequences read from a DNA text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["chromosome", "gene", "crossover", "mutation", "simulation", "dna"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
test = ["pytest"]

[project.scripts]
kromozom = "kromozom.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["kromozom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
