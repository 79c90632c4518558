import pytest

from dimensional import length, magnetic_flux, magnetic_flux_density
from dimensional.system import DimensionError

PREFIXES = [
    "yotta", "zetta", "exa", "peta", "tera", "giga", "mega", "kilo", "hecto", "deca", "",
    "deci", "centi", "milli", "micro", "nano", "pico", "femto", "atto", "zepto", "yocto",
]


def _square_meter():
    return length.new(1.0, "meter") * length.new(1.0, "meter")


def test_check_dimension():
    result = magnetic_flux.new(1.0, "weber") / _square_meter()
    assert result.dimension == magnetic_flux_density.MAGNETIC_FLUX_DENSITY.dimension
    assert result.isclose(magnetic_flux_density.new(1.0, "tesla"))


@pytest.mark.parametrize(
    "flux_unit, density_unit",
    [(f"{p}weber", f"{p}tesla") for p in PREFIXES] + [("nanoweber", "gamma")],
)
def test_check_units(flux_unit, density_unit):
    expected = magnetic_flux_density.new(1.0, density_unit)
    computed = magnetic_flux.new(1.0, flux_unit) / _square_meter()
    assert expected.isclose(computed)


def test_gauss_in_tesla():
    assert magnetic_flux_density.new(1.0, "gauss").get("tesla") == pytest.approx(1.0e-4)


def test_round_trip_every_unit():
    for unit in magnetic_flux_density.MAGNETIC_FLUX_DENSITY:
        assert magnetic_flux_density.new(3.5, unit.name).get(unit.name) == pytest.approx(3.5)


def test_unknown_unit():
    with pytest.raises(KeyError):
        magnetic_flux_density.new(1.0, "weber")


def test_incompatible_comparison():
    with pytest.raises(DimensionError):
        magnetic_flux_density.new(1.0, "tesla").isclose(magnetic_flux.new(1.0, "weber"))