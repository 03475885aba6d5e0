"""Velocity Verlet time integration."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from os import PathLike
from typing import TextIO

from .atoms import Atom, clear_atoms
from .models import PairModels, choose_model
from .neighbors import compute_pair_interactions
from .params import DEFAULT_PARAMS_PATH
from .xyz import append_frame

DEFAULT_OUTPUT = "out.xyz"


def half_kick(atoms: Sequence[Atom], dt: float) -> None:
    """Advance every velocity by half a step of its acceleration."""
    half = dt / 2
    for atom in atoms:
        atom.vel_x += half * atom.a_x
        atom.vel_y += half * atom.a_y
        atom.vel_z += half * atom.a_z


def single_step(atoms: Sequence[Atom], dt: float) -> None:
    """Kick, drift and kick again with the current accelerations."""
    half_kick(atoms, dt)
    for atom in atoms:
        atom.x += dt * atom.vel_x
        atom.y += dt * atom.vel_y
        atom.z += dt * atom.vel_z
    half_kick(atoms, dt)


def propagate_verlet(
    models: PairModels,
    atoms: Sequence[Atom],
    r_cut: float,
    region: Sequence[float],
    dt: float,
    max_t: float,
    output: str | PathLike[str] = DEFAULT_OUTPUT,
    out: TextIO | None = None,
) -> None:
    """Run ``ceil(max_t / dt)`` steps, appending a frame to ``output`` after each."""
    out = sys.stdout if out is None else out
    for step in range(math.ceil(max_t / dt)):
        out.write(f"Step: {step}\n")
        compute_pair_interactions(atoms, r_cut, region, models, out)
        single_step(atoms, dt)
        append_frame(atoms, output)
        clear_atoms(atoms)


def start_simulation(
    model_name: str,
    atoms: Sequence[Atom],
    r_cut: float,
    region: Sequence[float],
    dt: float,
    max_t: float,
    output: str | PathLike[str] = DEFAULT_OUTPUT,
    params_path: str | PathLike[str] = DEFAULT_PARAMS_PATH,
    out: TextIO | None = None,
) -> None:
    """Set up the named model, write the first frame and integrate to ``max_t``."""
    out = sys.stdout if out is None else out
    models = choose_model(model_name, atoms, r_cut, params_path)
    append_frame(atoms, output)
    clear_atoms(atoms)
    propagate_verlet(models, atoms, r_cut, region, dt, max_t, output, out)
    out.write(f"Done running {max_t:f} steps\n")