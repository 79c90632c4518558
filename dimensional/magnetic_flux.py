"""Magnetic flux (base unit weber, m² · kg · s⁻² · A⁻¹)."""

from dimensional.system import Dimension, QuantityType, prefix

MAGNETIC_FLUX = QuantityType(
    "MagneticFlux",
    "magnetic flux",
    Dimension(length=2, mass=1, time=-2, electric_current=-1),
)

_UNITS = (
    ("yottaweber", prefix("yotta"), "YWb", "yottaweber", "yottawebers"),
    ("zettaweber", prefix("zetta"), "ZWb", "zettaweber", "zettawebers"),
    ("exaweber", prefix("exa"), "EWb", "exaweber", "exawebers"),
    ("petaweber", prefix("peta"), "PWb", "petaweber", "petawebers"),
    ("teraweber", prefix("tera"), "TWb", "teraweber", "terawebers"),
    ("gigaweber", prefix("giga"), "GWb", "gigaweber", "gigawebers"),
    ("megaweber", prefix("mega"), "MWb", "megaweber", "megawebers"),
    ("kiloweber", prefix("kilo"), "kWb", "kiloweber", "kilowebers"),
    ("hectoweber", prefix("hecto"), "hWb", "hectoweber", "hectowebers"),
    ("decaweber", prefix("deca"), "daWb", "decaweber", "decawebers"),
    ("weber", prefix("none"), "Wb", "weber", "webers"),
    ("deciweber", prefix("deci"), "dWb", "deciweber", "deciwebers"),
    ("centiweber", prefix("centi"), "cWb", "centiweber", "centiwebers"),
    ("milliweber", prefix("milli"), "mWb", "milliweber", "milliwebers"),
    ("microweber", prefix("micro"), "µWb", "microweber", "microwebers"),
    ("nanoweber", prefix("nano"), "nWb", "nanoweber", "nanowebers"),
    ("picoweber", prefix("pico"), "pWb", "picoweber", "picowebers"),
    ("femtoweber", prefix("femto"), "fWb", "femtoweber", "femtowebers"),
    ("attoweber", prefix("atto"), "aWb", "attoweber", "attowebers"),
    ("zeptoweber", prefix("zepto"), "zWb", "zeptoweber", "zeptowebers"),
    ("yoctoweber", prefix("yocto"), "yWb", "yoctoweber", "yoctowebers"),
    ("maxwell", 1.0e-8, "Mx", "maxwell", "maxwells"),
)

for _entry in _UNITS:
    MAGNETIC_FLUX.add_unit(*_entry)


def new(value, unit):
    """Create a magnetic flux from a value in the named unit."""
    return MAGNETIC_FLUX.new(value, unit)