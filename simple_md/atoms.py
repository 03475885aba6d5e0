"""Atom records and small geometric helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(slots=True)
class Atom:
    """A single particle: species, position, velocity, acceleration and LJ parameters."""

    symbol: str
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    vel_x: float = 0.0
    vel_y: float = 0.0
    vel_z: float = 0.0
    a_x: float = 0.0
    a_y: float = 0.0
    a_z: float = 0.0
    mass: float = 0.0
    epsilon: float = 0.0
    sigma: float = 0.0
    r_cut: float = 0.0

    def clear_motion(self) -> None:
        """Reset velocity and acceleration to zero."""
        self.a_x = self.a_y = self.a_z = 0.0
        self.vel_x = self.vel_y = self.vel_z = 0.0


def distance(a: Atom, b: Atom) -> float:
    """Euclidean distance between two atoms (no periodic images)."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)


def clear_atoms(atoms: Iterable[Atom]) -> None:
    """Reset velocity and acceleration of every atom."""
    for atom in atoms:
        atom.clear_motion()