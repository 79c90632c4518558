"""Jerk (base unit meter per second cubed, m · s⁻³)."""

from dimensional.system import Dimension, QuantityType, prefix

JERK = QuantityType("Jerk", "jerk", Dimension(length=1, time=-3))

# (prefix name, prefix symbol), from largest to smallest.
_SI_PREFIXES = (
    ("yotta", "Y"),
    ("zetta", "Z"),
    ("exa", "E"),
    ("peta", "P"),
    ("tera", "T"),
    ("giga", "G"),
    ("mega", "M"),
    ("kilo", "k"),
    ("hecto", "h"),
    ("deca", "da"),
    ("none", ""),
    ("deci", "d"),
    ("centi", "c"),
    ("milli", "m"),
    ("micro", "µ"),
    ("nano", "n"),
    ("pico", "p"),
    ("femto", "f"),
    ("atto", "a"),
    ("zepto", "z"),
    ("yocto", "y"),
)


def _prefixed_entries():
    for name, symbol in _SI_PREFIXES:
        meter = f"{'' if name == 'none' else name}meter"
        yield (
            f"{meter}_per_second_cubed",
            prefix(name),
            f"{symbol}m/s³",
            f"{meter} per second cubed",
            f"{meter}s per second cubed",
        )


_OTHER_UNITS = (
    ("foot_per_second_cubed", 3.048e-1, "ft/s³", "foot per second cubed",
     "feet per second cubed"),
    ("inch_per_second_cubed", 2.54e-2, "in/s³", "inch per second cubed",
     "inches per second cubed"),
    ("kilometer_per_minute_cubed", 4.629_629_629_629_629e-3, "km/min³",
     "kilometer per minute cubed", "kilometers per minute cubed"),
)

for _entry in (*_prefixed_entries(), *_OTHER_UNITS):
    JERK.add_unit(*_entry)


def new(value, unit):
    """Create a jerk from a value in the named unit."""
    return JERK.new(value, unit)