"""Mass (base unit kilogram, kg)."""

from dimensional.system import Dimension, QuantityType, prefix

MASS = QuantityType("Mass", "mass", Dimension(mass=1))

_UNITS = (
    ("yottagram", prefix("yotta") / prefix("kilo"), "Yg", "yottagram", "yottagrams"),
    ("zettagram", prefix("zetta") / prefix("kilo"), "Zg", "zettagram", "zettagrams"),
    ("exagram", prefix("exa") / prefix("kilo"), "Eg", "exagram", "exagrams"),
    ("petagram", prefix("peta") / prefix("kilo"), "Pg", "petagram", "petagrams"),
    ("teragram", prefix("tera") / prefix("kilo"), "Tg", "teragram", "teragrams"),
    ("gigagram", prefix("giga") / prefix("kilo"), "Gg", "gigagram", "gigagrams"),
    ("megagram", prefix("mega") / prefix("kilo"), "Mg", "megagram", "megagrams"),
    ("kilogram", prefix("kilo") / prefix("kilo"), "kg", "kilogram", "kilograms"),
    ("hectogram", prefix("hecto") / prefix("kilo"), "hg", "hectogram", "hectograms"),
    ("decagram", prefix("deca") / prefix("kilo"), "dag", "decagram", "decagrams"),
    ("gram", prefix("none") / prefix("kilo"), "g", "gram", "grams"),
    ("decigram", prefix("deci") / prefix("kilo"), "dg", "decigram", "decigrams"),
    ("centigram", prefix("centi") / prefix("kilo"), "cg", "centigram", "centigrams"),
    ("milligram", prefix("milli") / prefix("kilo"), "mg", "milligram", "milligrams"),
    ("microgram", prefix("micro") / prefix("kilo"), "µg", "microgram", "micrograms"),
    ("nanogram", prefix("nano") / prefix("kilo"), "ng", "nanogram", "nanograms"),
    ("picogram", prefix("pico") / prefix("kilo"), "pg", "picogram", "picograms"),
    ("femtogram", prefix("femto") / prefix("kilo"), "fg", "femtogram", "femtograms"),
    ("attogram", prefix("atto") / prefix("kilo"), "ag", "attogram", "attograms"),
    ("zeptogram", prefix("zepto") / prefix("kilo"), "zg", "zeptogram", "zeptograms"),
    ("yoctogram", prefix("yocto") / prefix("kilo"), "yg", "yoctogram", "yoctograms"),
    ("carat", 2.0e-4, "ct", "carat", "carats"),
    ("grain", 6.479_891e-5, "gr", "grain", "grains"),
    ("hundredweight_long", 5.080_235e1, "cwt long", "hundredweight (long)",
     "hundredweight (long)"),
    ("hundredweight_short", 4.535_924e1, "cwt short", "hundredweight (short)",
     "hundredweight (short)"),
    ("ounce", 2.834_952e-2, "oz", "ounce", "ounces"),
    ("ounce_troy", 3.110_348e-2, "oz t", "troy ounce", "troy ounces"),
    ("pennyweight", 1.555_174e-3, "dwt", "pennyweight", "pennyweight"),
    ("pound", 4.535_924e-1, "lb", "pound", "pounds"),
    ("pound_troy", 3.732_417e-1, "lb t", "troy pound", "troy pounds"),
    ("slug", 1.459_390e1, "slug", "slug", "slugs"),
    ("ton_assay", 2.916_667e-2, "AT", "assay ton", "assay tons"),
    ("ton_long", 1.016_047e3, "2240 lb", "long ton", "long tons"),
    ("ton_short", 9.071_847e2, "2000 lb", "short ton", "short tons"),
    ("ton", 1.0e3, "t", "ton", "tons"),  # metric ton
)

for _entry in _UNITS:
    MASS.add_unit(*_entry)


def new(value, unit):
    """Create a mass from a value in the named unit."""
    return MASS.new(value, unit)