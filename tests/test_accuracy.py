# tests/test_accuracy.py

from unittest.mock import patch

import pytest

np = pytest.importorskip("numpy")

from fixtrig.angles import TWO_PI
from fixtrig.diagnostics import accuracy


@pytest.mark.parametrize("func", ["sin", "cos"])
def test_error_profile_within_bound(func):
    rep = accuracy.error_profile(samples=512, func=func)
    assert rep.func == func
    assert rep.samples == 512
    assert 0 < rep.max_abs_error < 1e13
    assert rep.rms_error <= rep.max_abs_error
    assert 0 <= rep.worst_angle < TWO_PI


def test_sample_angles_cover_one_turn():
    angles = accuracy.sample_angles(8)
    assert len(angles) == 8
    assert angles[0] == 0
    assert angles[-1] < TWO_PI
    assert angles == sorted(angles)


def test_error_profile_rejects_bad_arguments():
    with pytest.raises(ValueError):
        accuracy.error_profile(samples=16, func="tan")
    with pytest.raises(ValueError):
        accuracy.error_profile(samples=0)


def test_main_prints_report(capsys):
    assert accuracy.main(["--samples", "256", "--func", "cos"]) == 0
    out = capsys.readouterr().out
    assert "cos: 256 samples" in out
    assert "max |error|" in out


def test_main_plot(tmp_path):
    mpl = pytest.importorskip("matplotlib")
    mpl.use("Agg")
    out = tmp_path / "err.png"
    assert accuracy.main(["--samples", "128", "--out-png", str(out)]) == 0
    assert out.exists()


def test_main_rejects_bad_samples(capsys):
    assert accuracy.main(["--samples", "0"]) == 1
    assert accuracy.main(["--samples", "-3"]) == 1
    assert "must be positive" in capsys.readouterr().err


def test_bad_func_reported_before_numpy_import():
    with patch.object(accuracy, "_need_numpy", side_effect=RuntimeError("no numpy")):
        with pytest.raises(ValueError, match="func must be one of"):
            accuracy.error_profile(samples=16, func="tan")


def test_main_sweeps_once_with_plot(tmp_path):
    mpl = pytest.importorskip("matplotlib")
    mpl.use("Agg")
    out = tmp_path / "err.png"
    with patch.object(accuracy, "error_curve", wraps=accuracy.error_curve) as curve:
        assert accuracy.main(["--samples", "64", "--out-png", str(out)]) == 0
    assert curve.call_count == 1
    assert out.exists()


def test_summarize_matches_profile():
    angles, err = accuracy.sweep(256, "sin")
    assert accuracy.summarize("sin", angles, err) == accuracy.error_profile(256, "sin")
