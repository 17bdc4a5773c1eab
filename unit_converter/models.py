"""Data models for the unit converter."""

from dataclasses import dataclass
from enum import Enum

from unit_converter.config import (
    CATEGORY_TITLES,
    CATEGORY_UNITS,
    DISTANCE_CONSTANTS,
    MASS_CONSTANTS,
    UNIT_LABELS,
)


class Category(str, Enum):
    """A group of commensurable units."""
    DISTANCE = "distance"
    MASS = "mass"

    @property
    def option_title(self) -> str:
        return CATEGORY_TITLES[self.value]

    @staticmethod
    def parse(name: str) -> "Category":
        """Look up a category by name, case-insensitively."""
        try:
            return Category(name.strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in Category)
            raise ValueError(f"Unknown category '{name}'. Valid: {valid}") from None


@dataclass(frozen=True)
class Unit:
    """A unit with its constant relative to the category's base unit."""
    name: str
    category: Category
    constant: float
    label: str


def _build_units() -> dict:
    units = {}
    for name, constant in DISTANCE_CONSTANTS.items():
        units[name] = Unit(name, Category.DISTANCE, constant, UNIT_LABELS[name])
    for name, constant in MASS_CONSTANTS.items():
        units[name] = Unit(name, Category.MASS, constant, UNIT_LABELS[name])
    return units


UNITS = _build_units()

KILOMETER = UNITS["kilometer"]
MILE = UNITS["mile"]
KILOGRAM = UNITS["kilogram"]
POUND = UNITS["pound"]


def units_for(category: Category) -> tuple:
    """Return the (base, other) unit pair of a category."""
    base, other = CATEGORY_UNITS[category.value]
    return UNITS[base], UNITS[other]


@dataclass(frozen=True)
class Converter:
    """A source/destination unit pair within one category."""
    category: Category
    source: Unit
    destination: Unit

    def __post_init__(self):
        for unit in (self.source, self.destination):
            if unit.category != self.category:
                raise ValueError(
                    f"Unit '{unit.name}' is {unit.category.value}, "
                    f"not {self.category.value}"
                )

    @property
    def source_label(self) -> str:
        return self.source.label

    @property
    def destination_label(self) -> str:
        return self.destination.label


@dataclass(frozen=True)
class ModelState:
    """Active category and direction of the converter screen."""
    category: Category = Category.DISTANCE
    reversed: bool = False

    @property
    def converter(self) -> Converter:
        """Converter for this state; base unit first unless reversed."""
        base, other = units_for(self.category)
        if self.reversed:
            return Converter(self.category, other, base)
        return Converter(self.category, base, other)
