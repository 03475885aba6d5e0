"""Selection of the pair interaction model used by a simulation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from os import PathLike

from .atoms import Atom
from .lj import LJModel
from .params import DEFAULT_PARAMS_PATH, load_params

PairFunction = Callable[[Atom, Atom], float]


class UnknownModelError(ValueError):
    """Raised when a model name is not recognised."""


@dataclass(frozen=True)
class PairModels:
    """The pair energy and the pair force magnitude of one model."""

    energy: PairFunction
    force: PairFunction


def choose_model(
    model_name: str,
    atoms: Sequence[Atom],
    r_max: float,
    params_path: str | PathLike[str] = DEFAULT_PARAMS_PATH,
) -> PairModels:
    """Build the named model, loading its parameters onto ``atoms``.

    Only ``"lj"`` is known; its parameters come from ``params_path``.
    """
    if model_name == "lj":
        load_params(atoms, params_path)
        model = LJModel(r_max)
        return PairModels(energy=model.energy, force=model.force)
    raise UnknownModelError(f"Unknown model '{model_name}'")