"""Force (base unit newton, kg · m · s⁻²)."""

from dimensional.system import Dimension, QuantityType, prefix

FORCE = QuantityType("Force", "force", Dimension(length=1, mass=1, time=-2))

_UNITS = (
    ("yottanewton", prefix("yotta"), "YN", "yottanewton", "yottanewtons"),
    ("zettanewton", prefix("zetta"), "ZN", "zettanewton", "zettanewtons"),
    ("exanewton", prefix("exa"), "EN", "exanewton", "exanewtons"),
    ("petanewton", prefix("peta"), "PN", "petanewton", "petanewtons"),
    ("teranewton", prefix("tera"), "TN", "teranewton", "teranewtons"),
    ("giganewton", prefix("giga"), "GN", "giganewton", "giganewtons"),
    ("meganewton", prefix("mega"), "MN", "meganewton", "meganewtons"),
    ("kilonewton", prefix("kilo"), "kN", "kilonewton", "kilonewtons"),
    ("hectonewton", prefix("hecto"), "hN", "hectonewton", "hectonewtons"),
    ("decanewton", prefix("deca"), "daN", "decanewton", "decanewtons"),
    ("newton", prefix("none"), "N", "newton", "newtons"),
    ("decinewton", prefix("deci"), "dN", "decinewton", "decinewtons"),
    ("centinewton", prefix("centi"), "cN", "centinewton", "centinewtons"),
    ("millinewton", prefix("milli"), "mN", "millinewton", "millinewtons"),
    ("micronewton", prefix("micro"), "µN", "micronewton", "micronewtons"),
    ("nanonewton", prefix("nano"), "nN", "nanonewton", "nanonewtons"),
    ("piconewton", prefix("pico"), "pN", "piconewton", "piconewtons"),
    ("femtonewton", prefix("femto"), "fN", "femtonewton", "femtonewtons"),
    ("attonewton", prefix("atto"), "aN", "attonewton", "attonewtons"),
    ("zeptonewton", prefix("zepto"), "zN", "zeptonewton", "zeptonewtons"),
    ("yoctonewton", prefix("yocto"), "yN", "yoctonewton", "yoctonewtons"),
    ("dyne", 1.0e-5, "dyn", "dyne", "dynes"),
    ("kilogram_force", 9.806_65e0, "kgf", "kilogram-force", "kilograms-force"),  # kilopond
    ("kip", 4.448_222e3, "kip", "kip", "kips"),
    ("ounce_force", 2.780_139e-1, "ozf", "ounce-force", "ounces-force"),
    ("poundal", 1.382_550e-1, "pdl", "poundal", "poundals"),
    ("pound_force", 4.448_222e0, "lbf", "pound-force", "pounds-force"),
    ("ton_force", 8.896_443e3, "2000 lbf", "ton-force", "tons-force"),
)

for _entry in _UNITS:
    FORCE.add_unit(*_entry)


def new(value, unit):
    """Create a force from a value in the named unit."""
    return FORCE.new(value, unit)