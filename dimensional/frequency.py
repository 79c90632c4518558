"""Frequency (base unit hertz, s⁻¹)."""

from dimensional.system import Dimension, QuantityType, prefix

FREQUENCY = QuantityType("Frequency", "frequency", Dimension(time=-1))

_UNITS = (
    ("yottahertz", prefix("yotta"), "YHz", "yottahertz", "yottahertz"),
    ("zettahertz", prefix("zetta"), "ZHz", "zettahertz", "zettahertz"),
    ("exahertz", prefix("exa"), "EHz", "exahertz", "exahertz"),
    ("petahertz", prefix("peta"), "PHz", "petahertz", "petahertz"),
    ("terahertz", prefix("tera"), "THz", "terahertz", "terahertz"),
    ("gigahertz", prefix("giga"), "GHz", "gigahertz", "gigahertz"),
    ("megahertz", prefix("mega"), "MHz", "megahertz", "megahertz"),
    ("kilohertz", prefix("kilo"), "kHz", "kilohertz", "kilohertz"),
    ("hectohertz", prefix("hecto"), "hHz", "hectohertz", "hectohertz"),
    ("decahertz", prefix("deca"), "daHz", "decahertz", "decahertz"),
    ("hertz", prefix("none"), "Hz", "hertz", "hertz"),
    ("decihertz", prefix("deci"), "dHz", "decihertz", "decihertz"),
    ("centihertz", prefix("centi"), "cHz", "centihertz", "centihertz"),
    ("millihertz", prefix("milli"), "mHz", "millihertz", "millihertz"),
    ("microhertz", prefix("micro"), "µHz", "microhertz", "microhertz"),
    ("nanohertz", prefix("nano"), "nHz", "nanohertz", "nanohertz"),
    ("picohertz", prefix("pico"), "pHz", "picohertz", "picohertz"),
    ("femtohertz", prefix("femto"), "fHz", "femtohertz", "femtohertz"),
    ("attohertz", prefix("atto"), "aHz", "attohertz", "attohertz"),
    ("zeptohertz", prefix("zepto"), "zHz", "zeptohertz", "zeptohertz"),
    ("yoctohertz", prefix("yocto"), "yHz", "yoctohertz", "yoctohertz"),
    ("cycle_per_day", 1.157_407_407_407_407_4e-5, "1/d", "cycle per day", "cycles per day"),
    ("cycle_per_hour", 2.777_777_777_777_777e-4, "1/h", "cycle per hour", "cycles per hour"),
    ("cycle_per_minute", 1.666_666_666_666_666_6e-2, "1/min", "cycle per minute",
     "cycles per minute"),
    ("cycle_per_shake", 1.0e8, "100 MHz", "cycle per shake", "cycles per shake"),
    ("cycle_per_year", 3.170_979_198_376_458e-8, "1/a", "cycle per year", "cycles per year"),
)

for _entry in _UNITS:
    FREQUENCY.add_unit(*_entry)


def new(value, unit):
    """Create a frequency from a value in the named unit."""
    return FREQUENCY.new(value, unit)