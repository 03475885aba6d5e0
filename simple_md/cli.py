"""Command line entry point for running a simulation from an XYZ file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .verlet import start_simulation
from .xyz import count_atoms, format_coords, read_xyz

R_CUT = 4.0
REGION = (30.0, 30.0, 30.0)
DT = 1.0
MAX_T = 1000.0
PROG = "simple_md"


def main(argv: Sequence[str] | None = None) -> int:
    """Run a simulation of ``<file.xyz>`` with ``<model_name>``; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Program requires two positional arguments:")
        print(f"{PROG} <file.xyz> <model_name> <timesteps> [default: 1]>")
        return 1
    path, model_name = args[0], args[1]
    try:
        n_atoms = count_atoms(path)
        atoms = read_xyz(path, n_atoms)
        print(n_atoms)
        print(format_coords(atoms), end="")
        start_simulation(model_name, atoms, R_CUT, REGION, DT, MAX_T)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())