# tests/test_cli.py

import pytest

from fixtrig import cli
from fixtrig.angles import PI, PI_OVER_TWO, SCALE


def test_parse_angle():
    assert cli.parse_angle("123") == 123
    assert cli.parse_angle("1.5", radians=True) == 1500000000000000000
    assert cli.parse_angle("3.141592653589793238", radians=True) == PI
    with pytest.raises(ValueError):
        cli.parse_angle("1.5")


@pytest.mark.parametrize(
    "v, s",
    [
        (SCALE, "1.000000000000000000"),
        (-SCALE, "-1.000000000000000000"),
        (0, "0.000000000000000000"),
        (-5, "-0.000000000000000005"),
        (707106781186547524, "0.707106781186547524"),
    ],
)
def test_format_fixed(v, s):
    assert cli.format_fixed(v) == s


def test_sin_command(capsys):
    assert cli.main(["sin", str(PI_OVER_TWO)]) == 0
    assert capsys.readouterr().out.strip() == str(SCALE)


def test_cos_command_radians_decimal(capsys):
    assert cli.main(["cos", "3.141592653589793238", "--radians", "--decimal"]) == 0
    assert capsys.readouterr().out.strip() == "-1.000000000000000000"


def test_sin_command_bad_angle(capsys):
    assert cli.main(["sin", "abc"]) == 2
    assert "invalid angle" in capsys.readouterr().err


def test_quarter_table_command(capsys):
    assert cli.main(["quarter-table", "--check"]) == 0
    assert "OK" in capsys.readouterr().out
