import pytest

from dimensional import force, frequency, heat_flux_density, length
from dimensional.system import DimensionError

PREFIXES = [
    "yotta", "zetta", "exa", "peta", "tera", "giga", "mega", "kilo", "hecto", "deca", "",
    "deci", "centi", "milli", "micro", "nano", "pico", "femto", "atto", "zepto", "yocto",
]


def _power(prefix_word):
    """One prefixed watt, built as newton · meter · hertz."""
    return (
        force.new(1.0, f"{prefix_word}newton")
        * length.new(1.0, "meter")
        * frequency.new(1.0, "hertz")
    )


def _square_meter():
    return length.new(1.0, "meter") * length.new(1.0, "meter")


def test_check_dimension():
    result = _power("kilo") / _square_meter()
    assert result.dimension == heat_flux_density.HEAT_FLUX_DENSITY.dimension
    assert result.isclose(heat_flux_density.new(1.0, "kilowatt_per_square_meter"))


@pytest.mark.parametrize("prefix_word", PREFIXES)
def test_check_units(prefix_word):
    expected = heat_flux_density.new(1.0, f"{prefix_word}watt_per_square_meter")
    assert expected.isclose(_power(prefix_word) / _square_meter())


def test_unit_names():
    unit = heat_flux_density.HEAT_FLUX_DENSITY.unit("decawatt_per_square_meter")
    assert unit.abbreviation == "daW/m²"
    assert unit.plural == "decawatts per square meter"
    assert len(heat_flux_density.HEAT_FLUX_DENSITY) == len(PREFIXES)


def test_round_trip_every_unit():
    for unit in heat_flux_density.HEAT_FLUX_DENSITY:
        assert heat_flux_density.new(2.25, unit.name).get(unit.name) == pytest.approx(2.25)


def test_unknown_unit():
    with pytest.raises(KeyError):
        heat_flux_density.new(1.0, "watt")


def test_adding_other_dimension_fails():
    with pytest.raises(DimensionError):
        heat_flux_density.new(1.0, "watt_per_square_meter") + length.new(1.0, "meter")