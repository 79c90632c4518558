import pytest

from dimensional import length, mass
from dimensional.system import Dimension, DimensionError

ALL_UNITS = [unit.name for unit in length.LENGTH]

PREFIXED = [
    "yottameter", "zettameter", "exameter", "petameter", "terameter", "gigameter",
    "megameter", "kilometer", "hectometer", "decameter", "meter", "decimeter",
    "centimeter", "millimeter", "micrometer", "nanometer", "picometer", "femtometer",
    "attometer", "zeptometer", "yoctometer",
]


@pytest.mark.parametrize("name", ALL_UNITS)
def test_round_trip(name):
    assert length.new(3.5, name).get(name) == pytest.approx(3.5)


def test_prefixed_units_descend():
    coefficients = [length.LENGTH.unit(name).coefficient for name in PREFIXED]
    assert coefficients == sorted(coefficients, reverse=True)
    assert len(set(coefficients)) == len(coefficients)


def test_documented_constants():
    assert length.new(1.0, "foot").get("meter") == pytest.approx(3.048e-1)
    assert length.new(1.0, "mile").get("meter") == pytest.approx(1.609_344e3)
    assert length.new(1.0, "nautical_mile").get("meter") == pytest.approx(1.852e3)


def test_imperial_relations():
    assert length.new(12.0, "inch").isclose(length.new(1.0, "foot"))
    assert length.new(3.0, "foot").isclose(length.new(1.0, "yard"))
    assert length.new(1000.0, "mil").isclose(length.new(1.0, "inch"))


def test_kilometer_is_thousand_meters():
    assert length.new(1.0, "kilometer").isclose(length.new(1000.0, "meter"))
    assert length.new(1.0, "micron").isclose(length.new(1.0, "micrometer"))


def test_dimension():
    assert length.LENGTH.dimension == Dimension(length=1)
    assert str(length.LENGTH.dimension) == "L"


def test_unit_metadata():
    angstrom = length.LENGTH.unit("angstrom")
    assert angstrom.abbreviation == "Å"
    assert angstrom.plural == "ångströms"
    assert length.LENGTH.unit("foot").plural == "feet"


def test_unknown_unit():
    with pytest.raises(KeyError):
        length.new(1.0, "furlong")


def test_cannot_add_mass():
    with pytest.raises(DimensionError):
        length.new(1.0, "meter") + mass.new(1.0, "kilogram")


def test_area_divided_by_length():
    side = length.new(2.0, "meter")
    assert (side * side / side).isclose(side * 1.0 * side / side)
    assert (side * side).dimension == Dimension(length=2)
    assert (side * side).sqrt().value == side.value