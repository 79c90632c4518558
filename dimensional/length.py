"""Length (base unit meter, m)."""

from dimensional.system import Dimension, QuantityType, prefix

LENGTH = QuantityType("Length", "length", Dimension(length=1))

_UNITS = (
    ("yottameter", prefix("yotta"), "Ym", "yottameter", "yottameters"),
    ("zettameter", prefix("zetta"), "Zm", "zettameter", "zettameters"),
    ("exameter", prefix("exa"), "Em", "exameter", "exameters"),
    ("petameter", prefix("peta"), "Pm", "petameter", "petameters"),
    ("terameter", prefix("tera"), "Tm", "terameter", "terameters"),
    ("gigameter", prefix("giga"), "Gm", "gigameter", "gigameters"),
    ("megameter", prefix("mega"), "Mm", "megameter", "megameters"),
    ("kilometer", prefix("kilo"), "km", "kilometer", "kilometers"),
    ("hectometer", prefix("hecto"), "hm", "hectometer", "hectometers"),
    ("decameter", prefix("deca"), "dam", "decameter", "decameters"),
    ("meter", prefix("none"), "m", "meter", "meters"),
    ("decimeter", prefix("deci"), "dm", "decimeter", "decimeters"),
    ("centimeter", prefix("centi"), "cm", "centimeter", "centimeters"),
    ("millimeter", prefix("milli"), "mm", "millimeter", "millimeters"),
    ("micrometer", prefix("micro"), "µm", "micrometer", "micrometers"),
    ("nanometer", prefix("nano"), "nm", "nanometer", "nanometers"),
    ("picometer", prefix("pico"), "pm", "picometer", "picometers"),
    ("femtometer", prefix("femto"), "fm", "femtometer", "femtometers"),
    ("attometer", prefix("atto"), "am", "attometer", "attometers"),
    ("zeptometer", prefix("zepto"), "zm", "zeptometer", "zeptometers"),
    ("yoctometer", prefix("yocto"), "ym", "yoctometer", "yoctometers"),
    ("angstrom", 1.0e-10, "Å", "ångström", "ångströms"),
    ("astronomical_unit", 1.495_979e11, "ua", "astronomical unit", "astronomical units"),
    ("chain", 2.011_684e1, "ch", "chain", "chains"),
    ("fathom", 1.828_804e0, "fathom", "fathom", "fathoms"),
    ("fermi", 1.0e-15, "fermi", "fermi", "fermis"),
    ("foot", 3.048e-1, "ft", "foot", "feet"),
    ("foot_survey", 3.048_006e-1, "ft (U.S. survey)", "foot (U.S. survey)", "feet (U.S. survey)"),
    ("inch", 2.54e-2, "in", "inch", "inches"),
    ("light_year", 9.460_73e15, "l. y.", "light year", "light years"),
    ("microinch", 2.54e-8, "μin", "microinch", "microinches"),
    ("micron", 1.0e-6, "μ", "micron", "microns"),
    ("mil", 2.54e-5, "0.001 in", "mil", "mils"),
    ("mile", 1.609_344e3, "mi", "mile", "miles"),
    ("mile_survey", 1.609_347e3, "mi (U.S. survey)", "mile (U.S. survey)", "miles (U.S. survey)"),
    ("nautical_mile", 1.852e3, "M", "nautical mile", "nautical miles"),
    ("parsec", 3.085_678e16, "pc", "parsec", "parsecs"),
    ("pica_computer", 4.233_333_333_333_333e-3, "1/6 in (computer)", "pica (computer)",
     "picas (computer)"),
    ("pica_printers", 4.217_518e-3, "1/6 in", "pica (printer's)", "picas (printer's)"),
    ("point_computer", 3.527_778e-4, "1/72 in (computer)", "point (computer)",
     "points (computer)"),
    ("point_printers", 3.514_598e-4, "1/72 in", "point (printer's)", "points (printer's)"),
    ("rod", 5.029_21e0, "rd", "rod", "rods"),
    ("yard", 9.144e-1, "yd", "yard", "yards"),
)

for _entry in _UNITS:
    LENGTH.add_unit(*_entry)


def new(value, unit):
    """Create a length from a value in the named unit."""
    return LENGTH.new(value, unit)