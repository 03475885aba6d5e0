import copy
import io

import pytest

from simple_md.atoms import Atom
from simple_md.models import PairModels, UnknownModelError
from simple_md.verlet import half_kick, propagate_verlet, single_step, start_simulation
from simple_md.xyz import FRAME_COMMENT

REGION = (30.0, 30.0, 30.0)
PARAMS = "header\n" * 6 + "Ar, Ar, 4.0, 0.0104, 3.4, 39.948\n"


def _frames(path):
    return sum(1 for line in path.read_text().splitlines() if line == FRAME_COMMENT)


def _zero_models():
    return PairModels(energy=lambda a, b: 0.0, force=lambda a, b: 0.0)


def test_half_kick_uses_half_step():
    atom = Atom("Ar", a_x=2.0)
    half_kick([atom], 1.0)
    assert atom.vel_x == pytest.approx(1.0)


def test_single_step_is_two_half_kicks_in_velocity():
    atom = Atom("Ar", a_x=1.0, a_y=2.0, a_z=-3.0, vel_x=0.5)
    reference = copy.copy(atom)
    single_step([atom], 0.5)
    half_kick([reference], 0.5)
    half_kick([reference], 0.5)
    assert (atom.vel_x, atom.vel_y, atom.vel_z) == pytest.approx(
        (reference.vel_x, reference.vel_y, reference.vel_z)
    )


def test_single_step_drifts_without_acceleration():
    atom = Atom("Ar", x=2.0, vel_x=1.0)
    single_step([atom], 0.5)
    assert atom.x == pytest.approx(2.5)
    assert atom.y == 0.0


def test_propagate_writes_one_frame_per_step(tmp_path):
    atoms = [Atom("Ar", 5.0, 5.0, 5.0), Atom("Ar", 20.0, 20.0, 20.0)]
    output = tmp_path / "traj.xyz"
    out = io.StringIO()
    propagate_verlet(_zero_models(), atoms, 4.0, REGION, 1.0, 2.5, output, out)
    assert _frames(output) == 3
    text = out.getvalue()
    assert "Step: 0\n" in text and "Step: 2\n" in text
    assert "Step: 3\n" not in text


def test_propagate_clears_motion(tmp_path):
    atoms = [Atom("Ar", 5.0, 5.0, 5.0, vel_x=1.0, a_x=1.0)]
    propagate_verlet(
        _zero_models(), atoms, 4.0, REGION, 1.0, 1.0, tmp_path / "t.xyz", io.StringIO()
    )
    atom = atoms[0]
    assert (atom.vel_x, atom.a_x) == (0.0, 0.0)
    assert atom.x > 5.0


def test_start_simulation_runs_lj(tmp_path, capsys):
    params = tmp_path / "LJ.params"
    params.write_text(PARAMS, encoding="utf-8")
    atoms = [Atom("Ar", 15.0, 15.0, 15.0), Atom("Ar", 18.8, 15.0, 15.0)]
    output = tmp_path / "out.xyz"
    out = io.StringIO()
    start_simulation("lj", atoms, 4.0, REGION, 1.0, 2.0, output, params, out)
    assert _frames(output) == 3
    assert out.getvalue().endswith("Done running 2.000000 steps\n")
    assert atoms[0].mass == pytest.approx(39.948)


def test_start_simulation_unknown_model(tmp_path):
    output = tmp_path / "out.xyz"
    with pytest.raises(UnknownModelError):
        start_simulation(
            "morse", [Atom("Ar", 1.0, 1.0, 1.0)], 4.0, REGION, 1.0, 1.0, output,
            tmp_path / "LJ.params", io.StringIO(),
        )
    assert not output.exists()