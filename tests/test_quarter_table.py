# tests/test_quarter_table.py

import inspect
from unittest.mock import patch

import pytest

from fixtrig import tables
from fixtrig.design import quarter_table as qt
from fixtrig.tables import AMPLITUDE, SINE_TABLE


def test_generator_reproduces_embedded_table():
    assert qt.generate_quarter_table() == list(SINE_TABLE)


def test_generator_small_table():
    assert qt.generate_quarter_table(5, 100) == [0, 38, 71, 92, 100]


@pytest.mark.parametrize("nodes, amplitude", [(1, 100), (5, 0)])
def test_generator_rejects_bad_parameters(nodes, amplitude):
    with pytest.raises(ValueError):
        qt.generate_quarter_table(nodes, amplitude)


def test_interpolation_error_of_embedded_table():
    # (pi/512)^2 / 8 ~ 4.7e-6 at the peak
    err = qt.max_interpolation_error(SINE_TABLE, AMPLITUDE)
    assert 1e-6 < err < 5e-6


def test_format_table_matches_module_source():
    assert qt.format_table(SINE_TABLE) in inspect.getsource(tables)


def test_main_check_ok(capsys):
    assert qt.main(["--check"]) == 0
    assert "OK" in capsys.readouterr().out


def test_main_check_rejects_wrong_shape(capsys):
    assert qt.main(["--check", "--nodes", "5", "--amplitude", "100"]) == 1
    assert "Invalid table" in capsys.readouterr().err


def test_main_check_rejects_decreasing_table(capsys):
    broken = list(SINE_TABLE)
    broken[10] = broken[9] - 1
    with patch("fixtrig.design.quarter_table.generate_quarter_table", return_value=broken):
        assert qt.main(["--check"]) == 1
    assert "decreases at index 10" in capsys.readouterr().err


def test_main_check_mismatch(capsys):
    shifted = list(SINE_TABLE)
    shifted[1] += 1
    with patch("fixtrig.design.quarter_table.generate_quarter_table", return_value=shifted):
        assert qt.main(["--check"]) == 1
    assert "differing indices [1]" in capsys.readouterr().err


def test_main_rejects_bad_nodes(capsys):
    assert qt.main(["--nodes", "1"]) == 1
    assert "at least 2" in capsys.readouterr().err


def test_main_writes_output(tmp_path, capsys):
    out = tmp_path / "table.py"
    assert qt.main(["--nodes", "5", "--amplitude", "100", "--out-py", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert "    0, 38, 71, 92, 100," in text
    assert "Maximum interpolation error" in text
    assert str(out) in capsys.readouterr().out
