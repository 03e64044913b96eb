[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "readassembly"
version = "0.1.0"
description = "Assemble genomes from FASTQ reads by shortest common superstring heuristics and search reads for motifs"
requires-python = ">=3.10"
dependencies = []
keywords = ["bioinformatics", "genome", "assembly", "fastq", "superstring", "overlap"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[tool.hatch.build.targets.wheel]
packages = ["readassembly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
