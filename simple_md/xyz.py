"""Reading and writing XYZ coordinate files."""

from __future__ import annotations

import re
from collections.abc import Sequence
from os import PathLike

from .atoms import Atom

_INT = re.compile(r"\s*([+-]?\d+)")
_SYMBOL = re.compile(r"\s*(\S{1,8})")
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

FRAME_COMMENT = "generated by write2xyz"


class XyzError(ValueError):
    """Raised when an XYZ file is malformed."""


def count_atoms(path: str | PathLike[str]) -> int:
    """Return the atom count given at the start of an XYZ file."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    match = _INT.match(text)
    if match is None:
        raise XyzError("could not read atom count from first line")
    return int(match.group(1))


def read_xyz(path: str | PathLike[str], max_atoms: int) -> list[Atom]:
    """Read up to ``max_atoms`` atoms from the body of an XYZ file.

    The first two lines are the header. Reading stops at the first record
    that is not a symbol followed by three numbers.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise XyzError(f"could not open '{path}'") from exc
    if max_atoms < 0:
        raise XyzError(f"invalid atom count {max_atoms}")

    lines = text.splitlines(keepends=True)
    if len(lines) < 2:
        raise XyzError(f"'{path}' is missing the header or has an invalid header")
    body = "".join(lines[2:])

    atoms: list[Atom] = []
    pos = 0
    while len(atoms) < max_atoms:
        match = _SYMBOL.match(body, pos)
        if match is None:
            break
        symbol = match.group(1)
        pos = match.end()
        coords = []
        for _ in range(3):
            match = _FLOAT.match(body, pos)
            if match is None:
                break
            coords.append(float(match.group(1)))
            pos = match.end()
        if len(coords) < 3:
            break
        atoms.append(Atom(symbol, *coords))
    return atoms


def format_coords(atoms: Sequence[Atom]) -> str:
    """Render atoms as a small coordinate table."""
    rows = ["x y z\n"]
    rows.extend(f"{a.symbol:>3s} {a.x:f} {a.y:f} {a.z:f}\n" for a in atoms)
    return "".join(rows)


def append_frame(atoms: Sequence[Atom], path: str | PathLike[str]) -> None:
    """Append one XYZ frame holding ``atoms`` to ``path``."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{len(atoms)}\n")
        handle.write(f"{FRAME_COMMENT}\n")
        for a in atoms:
            handle.write(f"{a.symbol} {a.x:10.7f} {a.y:10.7f} {a.z:10.7f}\n")