"""Truncated and shifted Lennard-Jones pair potential with Kong mixing."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .atoms import Atom, distance


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base > 0 or exponent % 2 == 0:
            return math.inf
        return -math.inf
    except ValueError:
        return math.nan


def _div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def kong_sigma6(atom_i: Atom, atom_j: Atom) -> float:
    """Combined epsilon*sigma^6 coefficient for a pair."""
    if atom_i.symbol == atom_j.symbol:
        return _pow(atom_i.sigma, 6.0) * atom_i.epsilon
    product = (
        atom_i.sigma * _pow(atom_i.sigma, 6.0) * atom_j.epsilon * _pow(atom_j.sigma, 12.0)
    )
    return _pow(product, 0.5)


def kong_sigma12(atom_i: Atom, atom_j: Atom) -> float:
    """Combined epsilon*sigma^12 coefficient for a pair (Kong rule)."""
    if atom_i.symbol == atom_j.symbol:
        return _pow(atom_i.sigma, 12.0) * atom_i.epsilon
    root_i = _pow(atom_i.epsilon * _pow(atom_i.sigma, 12.0), 1.0 / 13.0)
    root_j = _pow(atom_j.epsilon * _pow(atom_j.sigma, 12.0), 1.0 / 13.0)
    return _pow((root_i + root_j) * 0.5, 13.0)


def lj_raw(epsilon: float, sigma: float, r: float) -> float:
    """Plain Lennard-Jones energy."""
    s6 = _pow(_div(sigma, r), 6.0)
    return 4 * epsilon * (s6 * s6 - s6)


def lj_raw_dr(epsilon: float, sigma: float, r: float) -> float:
    """Radial derivative of the plain Lennard-Jones energy."""
    s6 = _pow(_div(sigma, r), 6.0)
    return 4 * epsilon * (_div(-12 * s6 * s6, r) + _div(6 * s6, r))


def lj_potential(epsilon: float, sigma: float, r: float, r_max: float) -> float:
    """Shifted-force Lennard-Jones energy, cut at ``r_max``."""
    vc = lj_raw(epsilon, sigma, r_max)
    dvdr = lj_raw_dr(epsilon, sigma, r_max)
    v = lj_raw(epsilon, sigma, r)
    if v > vc or r >= r_max:
        return vc
    return v - vc - (r - r_max) * dvdr


def lj_raw_kong(sigma6: float, sigma12: float, r: float) -> float:
    """Lennard-Jones energy from combined sigma^6 and sigma^12 coefficients."""
    r6 = _pow(r, 6.0)
    return 4 * (_div(sigma12, r6 * r6) - _div(sigma6, r6))


def lj_raw_dr_kong(sigma6: float, sigma12: float, r: float) -> float:
    """Negative radial derivative of :func:`lj_raw_kong`; zero for r <= 0."""
    if r <= 0.0:
        return 0.0
    s_r7 = _div(sigma6, _pow(r, 7.0))
    s_r13 = _div(sigma12, _pow(r, 13.0))
    return 48 * (s_r13 - 0.5 * s_r7)


def lj_potential_kong(sigma6: float, sigma12: float, r: float, r_max: float) -> float:
    """Shifted-force energy from combined coefficients, cut at ``r_max``."""
    if r <= 0.0:
        return 0.0
    vc = lj_raw_kong(sigma6, sigma12, r_max)
    dvdr = lj_raw_dr_kong(sigma6, sigma12, r_max)
    v = lj_raw_kong(sigma6, sigma12, r)
    if v > vc or r >= r_max:
        return vc
    return v - vc - (r - r_max) * dvdr


@dataclass(frozen=True)
class LJModel:
    """Pairwise Lennard-Jones energy and force with cutoff ``r_max``."""

    r_max: float

    def energy(self, atom_i: Atom, atom_j: Atom) -> float:
        """Pair energy between two atoms."""
        r = distance(atom_i, atom_j)
        return lj_potential_kong(
            kong_sigma6(atom_i, atom_j), kong_sigma12(atom_i, atom_j), r, self.r_max
        )

    def force(self, atom_i: Atom, atom_j: Atom) -> float:
        """Pair force magnitude, clamped to its value at the cutoff."""
        r = distance(atom_i, atom_j)
        s6 = kong_sigma6(atom_i, atom_j)
        s12 = kong_sigma12(atom_i, atom_j)
        dvdr_max = lj_raw_dr_kong(s6, s12, self.r_max)
        dvdr = lj_raw_dr_kong(s6, s12, r)
        if abs(dvdr) > abs(dvdr_max):
            return -dvdr_max
        return -dvdr