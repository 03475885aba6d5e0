"""Lennard-Jones parameter files."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from os import PathLike
from typing import TextIO

from .atoms import Atom

DEFAULT_PARAMS_PATH = "data/LJ.params"
HEADER_LINES = 6
MAX_SPECIES_LEN = 15

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class ParamsError(OSError):
    """Raised when the parameter file cannot be read."""


@dataclass(frozen=True)
class LJEntry:
    """One parameter record for a species."""

    species: str
    cutoff: float = 0.0
    epsilon: float = 0.0
    sigma: float = 0.0
    mass: float = 0.0


def _leading_number(token: str | None) -> float:
    if token is None:
        return 0.0
    match = _NUMBER.match(token)
    return float(match.group(1)) if match else 0.0


def parse_params(text: str) -> list[LJEntry]:
    """Parse parameter records, skipping the header, blank lines and comments.

    Records are comma separated: species_i, species_j, cutoff, epsilon,
    sigma, mass. Empty fields collapse; missing numbers read as zero.
    """
    entries = []
    for line in text.splitlines()[HEADER_LINES:]:
        stripped = line.lstrip()
        if not stripped or stripped.startswith("#"):
            continue
        fields = [field for field in line.split(",") if field]
        if not fields:
            continue
        species = fields[0][:MAX_SPECIES_LEN].rstrip()
        numbers = fields[2:6] + [None] * (4 - len(fields[2:6]))
        cutoff, epsilon, sigma, mass = (_leading_number(t) for t in numbers)
        entries.append(LJEntry(species, cutoff, epsilon, sigma, mass))
    return entries


def apply_params(
    atoms: Sequence[Atom], entries: Iterable[LJEntry], out: TextIO | None = None
) -> None:
    """Copy each entry's parameters onto every atom of the matching species."""
    out = sys.stdout if out is None else out
    for entry in entries:
        printed = False
        for atom in atoms:
            if atom.symbol != entry.species:
                continue
            if not printed:
                out.write(
                    f"Match for atom {atom.symbol}:\n"
                    f"cutoff={entry.cutoff:.3f} Ang\n"
                    f"ε={entry.epsilon:.6f} eV\n"
                    f"σ={entry.sigma:.6f} Ang\n"
                    f"Mass={entry.mass:.4f}\n"
                )
                printed = True
            atom.r_cut = entry.cutoff
            atom.epsilon = entry.epsilon
            atom.sigma = entry.sigma
            atom.mass = entry.mass


def load_params(
    atoms: Sequence[Atom],
    path: str | PathLike[str] = DEFAULT_PARAMS_PATH,
    out: TextIO | None = None,
) -> list[LJEntry]:
    """Read the parameter file at ``path`` and apply it to ``atoms``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ParamsError(f"no LJ parameter file at '{path}'") from exc
    entries = parse_params(text)
    apply_params(atoms, entries, out)
    return entries