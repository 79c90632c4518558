import pytest

from dimensional import frequency, jerk, length
from dimensional.system import DimensionError

PREFIXES = [
    "yotta", "zetta", "exa", "peta", "tera", "giga", "mega", "kilo", "hecto", "deca", "",
    "deci", "centi", "milli", "micro", "nano", "pico", "femto", "atto", "zepto", "yocto",
]


def _per_time_cubed(length_unit, rate_unit):
    """A length divided by a time cubed, the time given as its reciprocal rate."""
    rate = frequency.new(1.0, rate_unit)
    return length.new(1.0, length_unit) * rate * rate * rate


def test_check_dimension():
    result = _per_time_cubed("meter", "hertz")
    assert result.dimension == jerk.JERK.dimension
    assert result.isclose(jerk.new(1.0, "meter_per_second_cubed"))


@pytest.mark.parametrize(
    "length_unit, rate_unit, jerk_unit",
    [(f"{p}meter", "hertz", f"{p}meter_per_second_cubed") for p in PREFIXES]
    + [
        ("foot", "hertz", "foot_per_second_cubed"),
        ("inch", "hertz", "inch_per_second_cubed"),
        ("kilometer", "cycle_per_minute", "kilometer_per_minute_cubed"),
    ],
)
def test_check_units(length_unit, rate_unit, jerk_unit):
    expected = jerk.new(1.0, jerk_unit)
    assert expected.isclose(_per_time_cubed(length_unit, rate_unit))


def test_unit_names():
    unit = jerk.JERK.unit("decameter_per_second_cubed")
    assert unit.abbreviation == "dam/s³"
    assert unit.plural == "decameters per second cubed"
    assert jerk.JERK.unit("foot_per_second_cubed").plural == "feet per second cubed"


def test_round_trip_every_unit():
    for unit in jerk.JERK:
        assert jerk.new(4.5, unit.name).get(unit.name) == pytest.approx(4.5)


def test_unknown_unit():
    with pytest.raises(KeyError):
        jerk.new(1.0, "meter")


def test_comparing_with_length_fails():
    with pytest.raises(DimensionError):
        jerk.new(1.0, "meter_per_second_cubed") < length.new(1.0, "meter")