# dimensional

Physical quantities that carry their dimension in the International System of
Quantities (ISQ) and convert between SI units, their decimal and binary
prefixes, and common non-SI units.

Every quantity keeps its value in SI base units. Multiplying or dividing
quantities combines their dimensions. Adding, subtracting or ordering
quantities whose dimension or kind differs raises `DimensionError`.

## Installation

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## Quantity modules

Each of these modules defines one quantity type, registers its units, and has a
`new(value, unit)` function that builds a quantity from a value in one of its
units, named as a string:

| module | quantity type | base unit |
| --- | --- | --- |
| `dimensional.length` | `LENGTH` | `meter` |
| `dimensional.mass` | `MASS` | `kilogram` |
| `dimensional.force` | `FORCE` | `newton` |
| `dimensional.frequency` | `FREQUENCY` | `hertz` |
| `dimensional.inductance` | `INDUCTANCE` | `henry` |
| `dimensional.magnetic_flux` | `MAGNETIC_FLUX` | `weber` |
| `dimensional.magnetic_flux_density` | `MAGNETIC_FLUX_DENSITY` | `tesla` |
| `dimensional.heat_flux_density` | `HEAT_FLUX_DENSITY` | `watt_per_square_meter` |
| `dimensional.jerk` | `JERK` | `meter_per_second_cubed` |
| `dimensional.information` | `INFORMATION` | `byte` |
| `dimensional.information_rate` | `INFORMATION_RATE` | `byte_per_second` |

Information and information rate are of kind `Kind.INFORMATION`; the byte is
their base unit and the bit is one eighth of it.

## Usage

```python
from dimensional import force, information, length, mass

print(length.new(1.0, "kilometer").get("mile"))     # about 0.6214
print(mass.new(2.0, "pound").get("kilogram"))       # about 0.9072
print(force.new(1.0, "newton").get("dyne"))         # about 100000
print(information.new(1.0, "kibibyte").get("bit"))  # 8192.0
```

`Quantity.get` takes a unit name, or a `Unit` object from a quantity type
(for example `length.LENGTH.unit("foot")`).

### Arithmetic

Quantities can be added and subtracted when dimension and kind match, and
multiplied or divided by numbers and by other quantities. A product or quotient
of two quantities has the combined dimension but no quantity type of its own;
`Quantity.into` gives it one, after checking the dimension and that the kinds
may be converted:

```python
from dimensional import frequency, information, information_rate, length
from dimensional import magnetic_flux, magnetic_flux_density

area = length.new(1.0, "meter") * length.new(1.0, "meter")
density = magnetic_flux.new(1.0, "weber") / area
tesla = density.into(magnetic_flux_density.MAGNETIC_FLUX_DENSITY)
print(tesla.get("tesla"))                           # 1.0

one_second = 1 / frequency.new(1.0, "hertz")
rate = information.new(8.0, "megabit") / one_second
print(rate.into(information_rate.INFORMATION_RATE).get("megabyte_per_second"))  # 1.0
```

`length.new(1.0, "meter") + mass.new(1.0, "kilogram")` raises `DimensionError`,
as does `into` to a type of another dimension.

`==` compares values exactly; `Quantity.isclose` compares two compatible
quantities with a relative tolerance of 1e-9, which suits values reached through
several conversions. `Quantity.sqrt` takes the square root of a quantity whose
exponents are all even.

### Building blocks

`dimensional.system` holds:

- `Dimension`: the seven ISQ exponents, with `*`, `/`, `**` and
  `is_dimensionless()`;
- `Kind`: `BASE`, `ANGLE`, `SOLID_ANGLE`, `INFORMATION`, `TEMPERATURE` and
  `CONSTITUENT_CONCENTRATION`;
- `Unit`, `QuantityType` (with `add_unit`, `unit`, `new`, iteration over its
  units and `in` for unit names), `Quantity` and `DimensionError`;
- `prefix(name)`, the factor of an SI prefix (`"yotta"` to `"yocto"`, `"none"`
  for 1) or a binary one (`"kibi"` to `"yobi"`); an unknown name raises
  `ValueError`.

A new quantity type is made with `QuantityType(name, description, dimension,
kind)` and filled with `add_unit`.

## What the package does not do

It has only the quantity types listed above: there are no ready-made types
for time, area, volume, energy, power, electric current or temperature, so
intermediate results of those dimensions can only be read through a `Unit`
object or converted with `into` to one of the listed types. Quantities print
through `repr` only; there is no formatting with unit abbreviations, no parsing
of text such as `"3 km"`, and no command-line tool.

## Running the tests

```
pytest
```