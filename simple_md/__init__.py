"""Molecular dynamics with Lennard-Jones pairs, cell lists and velocity Verlet."""

__version__ = "0.1.0"