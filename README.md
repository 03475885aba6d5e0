# simple_md

A small molecular dynamics engine. It reads atom positions from an XYZ
file, assigns Lennard-Jones parameters from a parameter file, finds
interacting pairs with a periodic cell list and integrates the motion
with a velocity Verlet step. Every frame is appended to an XYZ
trajectory.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
simple-md <file.xyz> <model_name>
```

The command needs both arguments; with fewer it prints a usage message
and exits with status 1. It reads the atom count from the start of the
XYZ file and the atoms from the lines after the two-line header, prints
the count and a coordinate table, and then runs the simulation.

The only model is `lj` (Lennard-Jones with Kong mixing rules for unlike
species). The settings are fixed: a periodic box of 30 × 30 × 30, a
cutoff of 4, a time step of 1 and a run time of 1000, which makes 1000
steps. The initial frame and the frame after every step are appended to
`out.xyz` in the working directory; an existing file is extended, not
replaced. For each step the step number and the total pair energy and
total pair force are printed to standard output.

An unknown model name, a missing file, a malformed atom count or an
atom outside the box is reported on standard error as `Error: ...` and
the command exits with status 1.

## Parameter file

Parameters are read from `data/LJ.params` relative to the working
directory. The first six lines are a header. Each following line that
is not blank and does not start with `#` holds comma-separated fields:

```
species_i, species_j, cutoff, epsilon, sigma, mass
```

Only `species_i` is matched against atom symbols; `species_j` is
ignored. Missing or non-numeric values read as zero. For each species
that matches, the assigned values are printed once.

## Library use

```python
from simple_md.xyz import count_atoms, read_xyz
from simple_md.verlet import start_simulation

atoms = read_xyz("argon.xyz", count_atoms("argon.xyz"))
start_simulation(
    "lj",
    atoms,
    r_cut=4.0,
    region=(30.0, 30.0, 30.0),
    dt=1.0,
    max_t=100.0,
    output="out.xyz",
    params_path="data/LJ.params",
)
```

The modules:

- `simple_md.atoms`: the `Atom` dataclass with `clear_motion()`,
  `distance` and `clear_atoms`.
- `simple_md.xyz`: `count_atoms`, `read_xyz`, `format_coords`,
  `append_frame` and `XyzError`.
- `simple_md.params`: `LJEntry`, `parse_params`, `apply_params`,
  `load_params` and `ParamsError`.
- `simple_md.lj`: `lj_raw`, `lj_raw_dr`, `lj_potential`,
  `lj_raw_kong`, `lj_raw_dr_kong`, `lj_potential_kong`, the Kong mixing
  rules `kong_sigma6` and `kong_sigma12`, and `LJModel` with `energy`
  and `force`.
- `simple_md.models`: `choose_model`, which returns `PairModels` or
  raises `UnknownModelError`.
- `simple_md.neighbors`: `compute_pair_interactions`, which returns
  `InteractionTotals`, and `acceleration` for a single pair.
- `simple_md.verlet`: `half_kick`, `single_step`, `propagate_verlet`
  and `start_simulation`.
- `simple_md.cli`: `main`, the `simple-md` command.

Functions that print take an `out` stream and write to standard output
when it is not given.

## What it does not do

- The box size, cutoff, time step and run time cannot be set from the
  command line; use `start_simulation` for other values.
- Positions are not wrapped back into the box. An atom that leaves the
  box makes the next force calculation raise `ValueError`.
- After every step both accelerations and velocities are reset to zero,
  so each step starts from rest; there is no initial velocity
  assignment and no thermostat.
- Trajectories hold only symbols and positions; velocities and energies
  are not stored.