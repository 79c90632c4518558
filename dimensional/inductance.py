"""Inductance (base unit henry, m² · kg · s⁻² · A⁻²)."""

from dimensional.system import Dimension, QuantityType, prefix

INDUCTANCE = QuantityType(
    "Inductance",
    "inductance",
    Dimension(length=2, mass=1, time=-2, electric_current=-2),
)

_UNITS = (
    ("yottahenry", prefix("yotta"), "YH", "yottahenry", "yottahenries"),
    ("zettahenry", prefix("zetta"), "ZH", "zettahenry", "zettahenries"),
    ("exahenry", prefix("exa"), "EH", "exahenry", "exahenries"),
    ("petahenry", prefix("peta"), "PH", "petahenry", "petahenries"),
    ("terahenry", prefix("tera"), "TH", "terahenry", "terahenries"),
    ("gigahenry", prefix("giga"), "GH", "gigahenry", "gigahenries"),
    ("megahenry", prefix("mega"), "MH", "megahenry", "megahenries"),
    ("kilohenry", prefix("kilo"), "kH", "kilohenry", "kilohenries"),
    ("hectohenry", prefix("hecto"), "hH", "hectohenry", "hectohenries"),
    ("decahenry", prefix("deca"), "daH", "decahenry", "decahenries"),
    ("henry", prefix("none"), "H", "henry", "henries"),
    ("decihenry", prefix("deci"), "dH", "decihenry", "decihenries"),
    ("centihenry", prefix("centi"), "cH", "centihenry", "centihenries"),
    ("millihenry", prefix("milli"), "mH", "millihenry", "millihenries"),
    ("microhenry", prefix("micro"), "µH", "microhenry", "microhenries"),
    ("nanohenry", prefix("nano"), "nH", "nanohenry", "nanohenries"),
    ("picohenry", prefix("pico"), "pH", "picohenry", "picohenries"),
    ("femtohenry", prefix("femto"), "fH", "femtohenry", "femtohenries"),
    ("attohenry", prefix("atto"), "aH", "attohenry", "attohenries"),
    ("zeptohenry", prefix("zepto"), "zH", "zeptohenry", "zeptohenries"),
    ("yoctohenry", prefix("yocto"), "yH", "yoctohenry", "yoctohenries"),
    ("abhenry", 1.0e-9, "abH", "abhenry", "abhenries"),
    ("stathenry", 8.987_552_917_115_481e11, "statH", "stathenry", "stathenries"),
)

for _entry in _UNITS:
    INDUCTANCE.add_unit(*_entry)


def new(value, unit):
    """Create an inductance from a value in the named unit."""
    return INDUCTANCE.new(value, unit)