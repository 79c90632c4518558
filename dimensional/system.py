"""Dimensions, units and quantities of the International System of Quantities."""

from __future__ import annotations

import enum
import math
import numbers
from dataclasses import dataclass, fields
from functools import total_ordering
from typing import Iterator, Optional, Union

#: Base quantities of the ISQ: (name, SI base unit, dimension symbol).
BASE_QUANTITIES = (
    ("length", "meter", "L"),
    ("mass", "kilogram", "M"),
    ("time", "second", "T"),
    ("electric_current", "ampere", "I"),
    ("thermodynamic_temperature", "kelvin", "Th"),
    ("amount_of_substance", "mole", "N"),
    ("luminous_intensity", "candela", "J"),
)

_SUPERSCRIPTS = str.maketrans("-0123456789", "⁻⁰¹²³⁴⁵⁶⁷⁸⁹")

_PREFIXES = {
    "yotta": 1.0e24,
    "zetta": 1.0e21,
    "exa": 1.0e18,
    "peta": 1.0e15,
    "tera": 1.0e12,
    "giga": 1.0e9,
    "mega": 1.0e6,
    "kilo": 1.0e3,
    "hecto": 1.0e2,
    "deca": 1.0e1,
    "none": 1.0,
    "deci": 1.0e-1,
    "centi": 1.0e-2,
    "milli": 1.0e-3,
    "micro": 1.0e-6,
    "nano": 1.0e-9,
    "pico": 1.0e-12,
    "femto": 1.0e-15,
    "atto": 1.0e-18,
    "zepto": 1.0e-21,
    "yocto": 1.0e-24,
    "kibi": float(2**10),
    "mebi": float(2**20),
    "gibi": float(2**30),
    "tebi": float(2**40),
    "pebi": float(2**50),
    "exbi": float(2**60),
    "zebi": float(2**70),
    "yobi": float(2**80),
}


def prefix(name):
    """Return the factor of an SI or binary prefix; "none" gives 1."""
    try:
        return _PREFIXES[name]
    except KeyError:
        raise ValueError(f"unknown prefix {name!r}") from None


class DimensionError(TypeError):
    """Raised when quantities of incompatible dimension or kind are combined."""


class Kind(enum.Enum):
    """Separates quantities that share a dimension but are not interchangeable."""

    BASE = "kind"
    ANGLE = "angle"
    SOLID_ANGLE = "solid angle"
    INFORMATION = "information"
    TEMPERATURE = "temperature"
    CONSTITUENT_CONCENTRATION = "constituent concentration"


_CONVERTIBLE_KINDS = frozenset(
    {Kind.ANGLE, Kind.SOLID_ANGLE, Kind.INFORMATION, Kind.CONSTITUENT_CONCENTRATION}
)


def _kinds_convertible(source: Kind, target: Kind) -> bool:
    if source is target:
        return True
    if source is Kind.BASE:
        return target in _CONVERTIBLE_KINDS
    if target is Kind.BASE:
        return source in _CONVERTIBLE_KINDS
    return False


@dataclass(frozen=True)
class Dimension:
    """Exponents of the seven ISQ base quantities."""

    length: int = 0
    mass: int = 0
    time: int = 0
    electric_current: int = 0
    thermodynamic_temperature: int = 0
    amount_of_substance: int = 0
    luminous_intensity: int = 0

    def _exponents(self) -> tuple:
        return tuple(getattr(self, field.name) for field in fields(self))

    def __mul__(self, other):
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(*(a + b for a, b in zip(self._exponents(), other._exponents())))

    def __truediv__(self, other):
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(*(a - b for a, b in zip(self._exponents(), other._exponents())))

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return Dimension(*(a * exponent for a in self._exponents()))

    def _root(self, degree: int) -> "Dimension":
        exponents = self._exponents()
        if any(a % degree for a in exponents):
            raise DimensionError(f"dimension {self} has no root of degree {degree}")
        return Dimension(*(a // degree for a in exponents))

    def is_dimensionless(self) -> bool:
        return not any(self._exponents())

    def __str__(self) -> str:
        parts = []
        for (_, _, symbol), exponent in zip(BASE_QUANTITIES, self._exponents()):
            if exponent == 1:
                parts.append(symbol)
            elif exponent:
                parts.append(symbol + str(exponent).translate(_SUPERSCRIPTS))
        return "".join(parts) or "1"


@dataclass(frozen=True)
class Unit:
    """A unit: its factor to the base unit, and its names."""

    name: str
    coefficient: float
    abbreviation: str
    singular: str
    plural: str
    dimension: Dimension = Dimension()
    kind: Kind = Kind.BASE

    def __str__(self) -> str:
        return self.abbreviation


class QuantityType:
    """A kind of quantity with its dimension and the units it may be expressed in."""

    def __init__(self, name, description, dimension, kind=Kind.BASE):
        self.name = name
        self.description = description
        self.dimension = dimension
        self.kind = kind
        self._units: dict[str, Unit] = {}

    def add_unit(self, name, coefficient, abbreviation, singular, plural):
        """Register a unit and return it."""
        if name in self._units:
            raise ValueError(f"{self.description} already has a unit {name!r}")
        if coefficient == 0:
            raise ValueError(f"unit {name!r} needs a non-zero coefficient")
        unit = Unit(
            name, float(coefficient), abbreviation, singular, plural, self.dimension, self.kind
        )
        self._units[name] = unit
        return unit

    def unit(self, name):
        try:
            return self._units[name]
        except KeyError:
            raise KeyError(f"{self.description} has no unit {name!r}") from None

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, name) -> bool:
        if isinstance(name, Unit):
            return self._units.get(name.name) == name
        return name in self._units

    def _resolve(self, unit) -> Unit:
        if isinstance(unit, Unit):
            if unit.dimension != self.dimension or unit.kind is not self.kind:
                raise DimensionError(
                    f"unit {unit.name!r} does not measure {self.description}"
                )
            return unit
        return self.unit(unit)

    def new(self, value, unit):
        """Create a quantity of this type from a value in the given unit."""
        resolved = self._resolve(unit)
        return Quantity(value * resolved.coefficient, self.dimension, self.kind, self)

    def __repr__(self) -> str:
        return f"QuantityType({self.name!r}, {str(self.dimension)!r}, {self.kind.name})"


@total_ordering
class Quantity:
    """A value stored in base units together with its dimension and kind."""

    __slots__ = ("value", "dimension", "kind", "quantity_type")

    def __init__(self, value, dimension, kind=Kind.BASE, quantity_type: Optional[QuantityType] = None):
        self.value = value
        self.dimension = dimension
        self.kind = kind
        self.quantity_type = quantity_type

    def _check_compatible(self, other: "Quantity", action: str) -> None:
        if self.dimension != other.dimension:
            raise DimensionError(
                f"cannot {action} quantities of dimension {self.dimension} and {other.dimension}"
            )
        if self.kind is not other.kind:
            raise DimensionError(
                f"cannot {action} quantities of kind {self.kind.name} and {other.kind.name}"
            )

    def get(self, unit: Union[Unit, str]):
        """Return the value expressed in the given unit."""
        if isinstance(unit, str):
            if self.quantity_type is None:
                raise ValueError(f"no named units for dimension {self.dimension}; pass a Unit")
            unit = self.quantity_type.unit(unit)
        if unit.dimension != self.dimension or unit.kind is not self.kind:
            raise DimensionError(f"unit {unit.name!r} does not match dimension {self.dimension}")
        return self.value / unit.coefficient

    def into(self, quantity_type):
        """Convert to another quantity type of the same dimension and a compatible kind."""
        if quantity_type.dimension != self.dimension:
            raise DimensionError(
                f"cannot convert dimension {self.dimension} into {quantity_type.dimension}"
            )
        if not _kinds_convertible(self.kind, quantity_type.kind):
            raise DimensionError(
                f"cannot convert kind {self.kind.name} into {quantity_type.kind.name}"
            )
        return Quantity(self.value, self.dimension, quantity_type.kind, quantity_type)

    def sqrt(self):
        return Quantity(math.sqrt(self.value), self.dimension._root(2))

    def isclose(self, other):
        """Whether two quantities of the same dimension and kind are approximately equal."""
        self._check_compatible(other, "compare")
        return math.isclose(self.value, other.value, rel_tol=1e-9)

    def __add__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_compatible(other, "add")
        return Quantity(self.value + other.value, self.dimension, self.kind, self.quantity_type)

    def __sub__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_compatible(other, "subtract")
        return Quantity(self.value - other.value, self.dimension, self.kind, self.quantity_type)

    def __mul__(self, other):
        if isinstance(other, Quantity):
            return Quantity(self.value * other.value, self.dimension * other.dimension)
        if isinstance(other, numbers.Real):
            return Quantity(self.value * other, self.dimension, self.kind, self.quantity_type)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return Quantity(other * self.value, self.dimension, self.kind, self.quantity_type)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Quantity):
            return Quantity(self.value / other.value, self.dimension / other.dimension)
        if isinstance(other, numbers.Real):
            return Quantity(self.value / other, self.dimension, self.kind, self.quantity_type)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Real):
            return Quantity(other / self.value, Dimension() / self.dimension)
        return NotImplemented

    def __neg__(self):
        return Quantity(-self.value, self.dimension, self.kind, self.quantity_type)

    def __abs__(self):
        return Quantity(abs(self.value), self.dimension, self.kind, self.quantity_type)

    def __eq__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return (
            self.dimension == other.dimension
            and self.kind is other.kind
            and self.value == other.value
        )

    def __hash__(self):
        return hash((self.value, self.dimension, self.kind))

    def __lt__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_compatible(other, "compare")
        return self.value < other.value

    def __repr__(self) -> str:
        name = self.quantity_type.name if self.quantity_type else str(self.dimension)
        return f"Quantity({self.value!r}, {name})"