import pytest

from dimensional import magnetic_flux, mass
from dimensional.magnetic_flux import MAGNETIC_FLUX
from dimensional.system import Dimension, DimensionError, Quantity, prefix

ELECTRIC_POTENTIAL = Dimension(length=2, mass=1, time=-3, electric_current=-1)

CASES = [
    ("yotta", "yottaweber"),
    ("zetta", "zettaweber"),
    ("exa", "exaweber"),
    ("peta", "petaweber"),
    ("tera", "teraweber"),
    ("giga", "gigaweber"),
    ("mega", "megaweber"),
    ("kilo", "kiloweber"),
    ("hecto", "hectoweber"),
    ("deca", "decaweber"),
    ("none", "weber"),
    ("deci", "deciweber"),
    ("centi", "centiweber"),
    ("milli", "milliweber"),
    ("micro", "microweber"),
    ("nano", "nanoweber"),
    ("pico", "picoweber"),
    ("femto", "femtoweber"),
    ("atto", "attoweber"),
    ("zepto", "zeptoweber"),
    ("yocto", "yoctoweber"),
]


def _second():
    return Quantity(1.0, Dimension(time=1))


def test_check_dimension():
    result = Quantity(1.0, ELECTRIC_POTENTIAL) * _second()
    assert result.dimension == MAGNETIC_FLUX.dimension
    assert result.isclose(magnetic_flux.new(1.0, "weber"))


@pytest.mark.parametrize("prefix_name, unit", CASES)
def test_check_units(prefix_name, unit):
    volts = Quantity(prefix(prefix_name), ELECTRIC_POTENTIAL)
    assert magnetic_flux.new(1.0, unit).isclose(volts * _second())


def test_maxwell():
    assert magnetic_flux.new(1.0, "weber").get("maxwell") == pytest.approx(1.0e8)
    assert magnetic_flux.new(1.0, "maxwell").get("nanoweber") == pytest.approx(10.0)


def test_unit_order_and_symbols():
    names = [unit.name for unit in MAGNETIC_FLUX]
    assert names[0] == "yottaweber"
    assert names[-1] == "maxwell"
    assert len(names) == 22
    assert MAGNETIC_FLUX.unit("microweber").abbreviation == "µWb"
    assert MAGNETIC_FLUX.unit("decaweber").abbreviation == "daWb"


def test_addition_across_units():
    total = magnetic_flux.new(1.0, "weber") + magnetic_flux.new(500.0, "milliweber")
    assert total.get("weber") == pytest.approx(1.5)


def test_adding_different_dimension_raises():
    with pytest.raises(DimensionError):
        magnetic_flux.new(1.0, "weber") + mass.new(1.0, "kilogram")


def test_unknown_unit_raises():
    with pytest.raises(KeyError):
        magnetic_flux.new(1.0, "tesla")
    assert "weber" in MAGNETIC_FLUX
    assert "tesla" not in MAGNETIC_FLUX