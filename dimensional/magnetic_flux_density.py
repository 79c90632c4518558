"""Magnetic flux density (base unit tesla, kg · s⁻² · A⁻¹)."""

from dimensional.system import Dimension, QuantityType, prefix

MAGNETIC_FLUX_DENSITY = QuantityType(
    "MagneticFluxDensity",
    "magnetic flux density",
    Dimension(mass=1, time=-2, electric_current=-1),
)

_UNITS = (
    ("yottatesla", prefix("yotta"), "YT", "yottatesla", "yottateslas"),
    ("zettatesla", prefix("zetta"), "ZT", "zettatesla", "zettateslas"),
    ("exatesla", prefix("exa"), "ET", "exatesla", "exateslas"),
    ("petatesla", prefix("peta"), "PT", "petatesla", "petateslas"),
    ("teratesla", prefix("tera"), "TT", "teratesla", "terateslas"),
    ("gigatesla", prefix("giga"), "GT", "gigatesla", "gigateslas"),
    ("megatesla", prefix("mega"), "MT", "megatesla", "megateslas"),
    ("kilotesla", prefix("kilo"), "kT", "kilotesla", "kiloteslas"),
    ("hectotesla", prefix("hecto"), "hT", "hectotesla", "hectoteslas"),
    ("decatesla", prefix("deca"), "daT", "decatesla", "decateslas"),
    ("tesla", prefix("none"), "T", "tesla", "teslas"),
    ("decitesla", prefix("deci"), "dT", "decitesla", "deciteslas"),
    ("centitesla", prefix("centi"), "cT", "centitesla", "centiteslas"),
    ("millitesla", prefix("milli"), "mT", "millitesla", "milliteslas"),
    ("microtesla", prefix("micro"), "µT", "microtesla", "microteslas"),
    ("nanotesla", prefix("nano"), "nT", "nanotesla", "nanoteslas"),
    ("picotesla", prefix("pico"), "pT", "picotesla", "picoteslas"),
    ("femtotesla", prefix("femto"), "fT", "femtotesla", "femtoteslas"),
    ("attotesla", prefix("atto"), "aT", "attotesla", "attoteslas"),
    ("zeptotesla", prefix("zepto"), "zT", "zeptotesla", "zeptoteslas"),
    ("yoctotesla", prefix("yocto"), "yT", "yoctotesla", "yoctoteslas"),
    ("gamma", 1.0e-9, "γ", "gamma", "gammas"),
    ("gauss", 1.0e-4, "G", "gauss", "gauss"),
)

for _entry in _UNITS:
    MAGNETIC_FLUX_DENSITY.add_unit(*_entry)


def new(value, unit):
    """Create a magnetic flux density from a value in the named unit."""
    return MAGNETIC_FLUX_DENSITY.new(value, unit)