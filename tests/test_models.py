import pytest

from simple_md.atoms import Atom
from simple_md.lj import LJModel
from simple_md.models import PairModels, UnknownModelError, choose_model
from simple_md.params import ParamsError

PARAMS = "header\n" * 6 + "Ar, Ar, 4.0, 0.0104, 3.4, 39.948\n"


@pytest.fixture
def params_file(tmp_path):
    path = tmp_path / "LJ.params"
    path.write_text(PARAMS, encoding="utf-8")
    return path


def _pair():
    return [Atom("Ar", 0.0, 0.0, 0.0), Atom("Ar", 3.8, 0.0, 0.0)]


def test_lj_applies_parameters(params_file, capsys):
    atoms = _pair()
    choose_model("lj", atoms, 4.0, params_file)
    for atom in atoms:
        assert atom.sigma == pytest.approx(3.4)
        assert atom.epsilon == pytest.approx(0.0104)
        assert atom.mass == pytest.approx(39.948)
    assert "Match for atom Ar:" in capsys.readouterr().out


def test_lj_functions_agree_with_lj_model(params_file, capsys):
    atoms = _pair()
    models = choose_model("lj", atoms, 4.0, params_file)
    reference = LJModel(4.0)
    assert isinstance(models, PairModels)
    assert models.energy(*atoms) == reference.energy(*atoms)
    assert models.force(*atoms) == reference.force(*atoms)


def test_unknown_model_raises_and_leaves_atoms(params_file):
    atoms = _pair()
    with pytest.raises(UnknownModelError, match="Unknown model 'coulomb'"):
        choose_model("coulomb", atoms, 4.0, params_file)
    assert atoms[0].sigma == 0.0


def test_missing_params_file(tmp_path):
    with pytest.raises(ParamsError):
        choose_model("lj", _pair(), 4.0, tmp_path / "absent.params")