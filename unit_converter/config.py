"""Application configuration and constants."""

import os

# Logging
LOG_LEVEL = os.environ.get("UNIT_CONVERTER_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Unit constants relative to each category's base unit (base = 1.0)
DISTANCE_CONSTANTS = {
    "kilometer": 1.0,
    "mile": 1.6,
}

MASS_CONSTANTS = {
    "kilogram": 1.0,
    "pound": 0.45359237,
}

# Display labels
UNIT_LABELS = {
    "kilometer": "Kilometers",
    "mile": "Miles",
    "kilogram": "Kilograms",
    "pound": "Pounds",
}

# Unit pair per category, base unit first
CATEGORY_UNITS = {
    "distance": ("kilometer", "mile"),
    "mass": ("kilogram", "pound"),
}

# Titles shown when picking a category
CATEGORY_TITLES = {
    "distance": "Miles and Kilometers",
    "mass": "Pounds to Kilograms",
}

DEFAULT_CATEGORY = "distance"
