"""Conversion engine and state transitions for the converter screen.

The screen state is an immutable ModelState; each transition returns a new
state. Labels and the active Converter are derived from the state.

Factor rules (s = source constant, d = destination constant):
- Distance: s * d when s >= d, otherwise s / d
- Mass:     s * d when s <= d, otherwise s / d

One unit of each pair is the base unit (constant 1.0), so both rules reduce
to s / d for every pair that can actually be built.
"""

import logging
from dataclasses import replace

from unit_converter.config import DEFAULT_CATEGORY
from unit_converter.models import Category, Converter, ModelState

logger = logging.getLogger(__name__)


def conversion_factor(converter: Converter) -> float:
    """Scale factor taking a value in the source unit to the destination unit."""
    s = converter.source.constant
    d = converter.destination.constant
    if converter.category == Category.DISTANCE:
        divide = s < d
    else:
        divide = s > d
    return s / d if divide else s * d


def apply(converter: Converter, value: float) -> float:
    return value * conversion_factor(converter)


def parse_value(text: str):
    """Parse numeric text, returning None when it isn't a number.

    Surrounding whitespace and underscore digit separators are rejected.
    """
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def format_value(value: float) -> str:
    return repr(value)


# --- State transitions ---

def initialize() -> ModelState:
    """Default state: kilometers to miles."""
    return ModelState(category=Category(DEFAULT_CATEGORY), reversed=False)


def toggle_direction(state: ModelState) -> ModelState:
    new_state = replace(state, reversed=not state.reversed)
    logger.debug("Toggled direction: %s", format_state(new_state))
    return new_state


def select_category(state: ModelState, category: Category) -> ModelState:
    new_state = replace(state, category=Category(category))
    logger.debug("Selected category: %s", format_state(new_state))
    return new_state


def converter_for(state: ModelState) -> Converter:
    return state.converter


def convert(state: ModelState, text: str) -> str:
    """Convert numeric text with the state's converter.

    Returns an empty string when the text isn't a valid number.
    """
    value = parse_value(text)
    if value is None:
        return ""
    return format_value(apply(converter_for(state), value))


def source_label(state: ModelState) -> str:
    return converter_for(state).source_label


def destination_label(state: ModelState) -> str:
    return converter_for(state).destination_label


def category_options() -> list:
    """(category, title) pairs offered when picking a unit pair."""
    return [(category, category.option_title) for category in Category]


def format_state(state: ModelState) -> str:
    """Format a state for display, e.g. 'Kilometers -> Miles (distance)'."""
    return f"{source_label(state)} -> {destination_label(state)} ({state.category.value})"
