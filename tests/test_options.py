import pytest

from colebrook.core.options import SolverOptions, load_options, MACHINE_EPS


def test_defaults_use_machine_eps_bracket():
    opts = SolverOptions()
    assert opts.lower == MACHINE_EPS
    assert opts.upper == 1.0
    assert opts.on_error == "raise"


@pytest.mark.parametrize("kwargs", [
    {"xtol": 0.0},
    {"rtol": 1e-20},
    {"maxiter": 0},
    {"lower": 0.0},
    {"lower": 0.5, "upper": 0.1},
    {"on_error": "skip"},
])
def test_invalid_options(kwargs):
    with pytest.raises(ValueError):
        SolverOptions(**kwargs)


def test_from_dict_ignores_unknown_keys():
    opts = SolverOptions.from_dict({"XTOL": 1e-10, "on_error": "nan", "colour": "blue"})
    assert opts.xtol == 1e-10
    assert opts.on_error == "nan"


def test_to_dict_round_trip():
    opts = SolverOptions(maxiter=50, progress=True)
    assert SolverOptions.from_dict(opts.to_dict()) == opts


def test_load_options_nested(tmp_path):
    path = tmp_path / "options.yml"
    path.write_text("solver:\n  xtol: 1e-10\n  maxiter: 200\n  on_error: nan\n")
    opts = load_options(path)
    assert opts.xtol == 1e-10
    assert opts.maxiter == 200
    assert opts.on_error == "nan"


def test_load_options_top_level(tmp_path):
    path = tmp_path / "options.yml"
    path.write_text("upper: 0.5\n")
    assert load_options(str(path)).upper == 0.5


def test_load_options_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_options(tmp_path / "missing.yml")


def test_load_options_rejects_non_mapping(tmp_path):
    path = tmp_path / "options.yml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_options(path)


@pytest.mark.parametrize("field", ["xtol", "rtol", "lower", "upper"])
@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_non_finite_options_rejected(field, value):
    with pytest.raises(ValueError):
        SolverOptions(**{field: value})
