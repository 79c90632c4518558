import pytest

from dimensional import inductance
from dimensional.inductance import INDUCTANCE
from dimensional.system import Dimension, DimensionError, Quantity, prefix

_POTENTIAL = Dimension(length=2, mass=1, time=-3, electric_current=-1)


def _volts(value):
    return Quantity(value, _POTENTIAL)


def _amperes(value):
    return Quantity(value, Dimension(electric_current=1))


def _seconds(value):
    return Quantity(value, Dimension(time=1))


def test_check_dimension():
    q = _volts(1.0) * _seconds(1.0) / _amperes(1.0)
    assert q.dimension == INDUCTANCE.dimension
    assert q.isclose(inductance.new(1.0, "henry"))


_CASES = [
    ("yotta", "yottahenry"),
    ("zetta", "zettahenry"),
    ("exa", "exahenry"),
    ("peta", "petahenry"),
    ("tera", "terahenry"),
    ("giga", "gigahenry"),
    ("mega", "megahenry"),
    ("kilo", "kilohenry"),
    ("hecto", "hectohenry"),
    ("deca", "decahenry"),
    ("none", "henry"),
    ("deci", "decihenry"),
    ("centi", "centihenry"),
    ("milli", "millihenry"),
    ("micro", "microhenry"),
    ("nano", "nanohenry"),
    ("pico", "picohenry"),
    ("femto", "femtohenry"),
    ("atto", "attohenry"),
    ("zepto", "zeptohenry"),
    ("yocto", "yoctohenry"),
]


@pytest.mark.parametrize("volt_prefix, unit", _CASES)
def test_units(volt_prefix, unit):
    expected = _volts(prefix(volt_prefix)) * _seconds(1.0) / _amperes(1.0)
    assert inductance.new(1.0, unit).isclose(expected)


def test_abhenry_from_abvolt_and_abampere():
    expected = _volts(1.0e-8) * _seconds(1.0) / _amperes(1.0e1)
    assert inductance.new(1.0, "abhenry").isclose(expected)


def test_stathenry_coefficient():
    assert inductance.new(1.0, "stathenry").get("henry") == pytest.approx(
        8.987552917115481e11
    )


def test_plural_name():
    assert INDUCTANCE.unit("millihenry").plural == "millihenries"


def test_compare_with_potential_raises():
    with pytest.raises(DimensionError):
        inductance.new(1.0, "henry").isclose(_volts(1.0))


def test_round_trip():
    assert inductance.new(4.0, "microhenry").get("microhenry") == pytest.approx(4.0)