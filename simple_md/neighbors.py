"""Pair interactions found through a linked-cell neighbour search."""

from __future__ import annotations

import itertools
import math
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from .atoms import Atom
from .models import PairModels


@dataclass(frozen=True)
class InteractionTotals:
    """Summed pair energy and summed pair force magnitude."""

    energy: float
    force: float


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def acceleration(model: Callable[[Atom, Atom], float], atom_i: Atom, atom_j: Atom) -> None:
    """Add the pair force from ``model`` to both atoms' accelerations."""
    dx = atom_i.x - atom_j.x
    dy = atom_i.y - atom_j.y
    dz = atom_i.z - atom_j.z
    r = math.sqrt(dx * dx + dy * dy + dz * dz)
    if r == 0.0:
        return
    magnitude = model(atom_i, atom_j)
    fx = magnitude * dx / r
    fy = magnitude * dy / r
    fz = magnitude * dz / r
    atom_i.a_x += _ratio(fx, atom_i.mass)
    atom_i.a_y += _ratio(fy, atom_i.mass)
    atom_i.a_z += _ratio(fz, atom_i.mass)
    atom_j.a_x -= _ratio(fx, atom_j.mass)
    atom_j.a_y -= _ratio(fy, atom_j.mass)
    atom_j.a_z -= _ratio(fz, atom_j.mass)


def _grid(region: Sequence[float], r_cut: float) -> tuple[list[int], list[float]]:
    counts = [math.floor(length / r_cut) for length in region]
    if any(count <= 0 for count in counts):
        raise ValueError("the region must be at least one cutoff wide on every axis")
    sizes = [length / count for length, count in zip(region, counts)]
    return counts, sizes


def _bin_atoms(
    atoms: Sequence[Atom], counts: list[int], sizes: list[float]
) -> dict[int, list[int]]:
    lcyz = counts[1] * counts[2]
    n_cells = lcyz * counts[0]
    cells: dict[int, list[int]] = {}
    for index, atom in enumerate(atoms):
        try:
            mc = [int(p / s) for p, s in zip((atom.x, atom.y, atom.z), sizes)]
        except (OverflowError, ValueError) as exc:
            raise ValueError(f"atom {index} has no finite position") from exc
        cell = mc[0] * lcyz + mc[1] * counts[2] + mc[2]
        if not 0 <= cell < n_cells:
            raise ValueError(f"atom {index} lies outside the simulation region")
        cells.setdefault(cell, []).append(index)
    # Cells are scanned most recently added atom first.
    return {cell: members[::-1] for cell, members in cells.items()}


def compute_pair_interactions(
    atoms: Sequence[Atom],
    r_cut: float,
    region: Sequence[float],
    models: PairModels,
    out: TextIO | None = None,
) -> InteractionTotals:
    """Accumulate pair energies, forces and accelerations for atoms within ``r_cut``.

    Atoms are binned into cells of the box ``region``; every pair found in a
    cell and its 26 neighbours closer than ``r_cut`` contributes.
    """
    out = sys.stdout if out is None else out
    counts, sizes = _grid(region, r_cut)
    lcyz = counts[1] * counts[2]
    cells = _bin_atoms(atoms, counts, sizes)
    cutoff2 = r_cut * r_cut

    e_tot = 0.0
    f_tot = 0.0
    for cell in sorted(cells):
        mc = (cell // lcyz, (cell % lcyz) // counts[2], cell % counts[2])
        for offsets in itertools.product((-1, 0, 1), repeat=3):
            mcl = [m + o for m, o in zip(mc, offsets)]
            shift = [
                -length if m < 0 else length if m >= count else 0.0
                for m, count, length in zip(mcl, counts, region)
            ]
            neighbour = (
                ((mcl[0] + counts[0]) % counts[0]) * lcyz
                + ((mcl[1] + counts[1]) % counts[1]) * counts[2]
                + ((mcl[2] + counts[2]) % counts[2])
            )
            others = cells.get(neighbour)
            if not others:
                continue
            for i in cells[cell]:
                atom_i = atoms[i]
                for j in others:
                    if i >= j:
                        continue
                    atom_j = atoms[j]
                    rx = atom_i.x - atom_j.x + shift[0]
                    ry = atom_i.y - atom_j.y + shift[1]
                    rz = atom_i.z - atom_j.z + shift[2]
                    if rx * rx + ry * ry + rz * rz < cutoff2:
                        e_tot += models.energy(atom_i, atom_j)
                        f_tot += models.force(atom_i, atom_j)
                        acceleration(models.force, atom_i, atom_j)

    out.write(f"Total E:         {e_tot:3g} eV    \n")
    out.write(f"Total Forces:    {f_tot:3g} eV/Ang\n")
    return InteractionTotals(e_tot, f_tot)