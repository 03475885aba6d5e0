[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simple_md"
version = "0.1.0"
description = "A small molecular dynamics engine with a Lennard-Jones pair model, cell-list neighbours and velocity Verlet integration"
requires-python = ">=3.10"
dependencies = []
keywords = ["molecular dynamics", "lennard-jones", "verlet", "xyz", "simulation"]
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simple-md = "simple_md.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["simple_md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
