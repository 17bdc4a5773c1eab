"""Command-line interface for the unit converter."""

import argparse
import logging
import sys

from unit_converter.config import DEFAULT_CATEGORY
from unit_converter.converter import (
    category_options,
    convert,
    destination_label,
    format_state,
    initialize,
    parse_value,
    select_category,
    source_label,
    toggle_direction,
)
from unit_converter.logging_utils import setup_logger
from unit_converter.models import Category, ModelState

logger = logging.getLogger(__name__)

CATEGORY_CHOICES = [c.value for c in Category]


def _state_from_args(args) -> ModelState:
    state = initialize()
    state = select_category(state, Category.parse(args.category))
    if args.reverse:
        state = toggle_direction(state)
    return state


# --- Commands ---

def cmd_convert(args) -> int:
    state = _state_from_args(args)
    result = convert(state, args.value)
    if not result:
        print(result)
        return 1
    print(f"{args.value} {source_label(state)} = {result} {destination_label(state)}")
    return 0


def cmd_labels(args) -> int:
    state = _state_from_args(args)
    print(f"Source:      {source_label(state)}")
    print(f"Destination: {destination_label(state)}")
    return 0


def cmd_categories(args) -> int:
    for category, title in category_options():
        print(f"{category.value:<10} {title}")
    return 0


INTERACTIVE_HELP = """Enter a number to convert it (no surrounding spaces).
  t             toggle direction
  c <category>  select category (distance, mass)
  q             quit"""


def cmd_interactive(args) -> int:
    state = _state_from_args(args)
    last_input = ""

    print(INTERACTIVE_HELP)
    print(format_state(state))

    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        # Commands are trimmed; values are converted as typed
        command = line.strip()

        if command in ("q", "quit", "exit"):
            break
        if command in ("t", "toggle"):
            state = toggle_direction(state)
            print(format_state(state))
        elif command == "c" or command.startswith("c "):
            name = command[1:].strip()
            try:
                category = Category.parse(name)
            except ValueError as e:
                print(e)
                continue
            state = select_category(state, category)
            print(format_state(state))
        elif command in ("?", "help"):
            print(INTERACTIVE_HELP)
            continue
        else:
            last_input = line
            print(convert(state, last_input))
            continue

        # Re-convert the last value after a toggle or category change
        if last_input:
            print(convert(state, last_input))

    return 0


# --- Argument parser ---

def _add_state_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--category", choices=CATEGORY_CHOICES, default=DEFAULT_CATEGORY,
                        help="Unit pair (default: distance)")
    parser.add_argument("--reverse", action="store_true",
                        help="Swap source and destination units")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unit-converter",
        description="Convert kilometers/miles and kilograms/pounds",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- convert ---
    convert_p = subparsers.add_parser("convert", help="Convert a value")
    convert_p.add_argument("value", nargs="?", help="Numeric value in the source unit")
    _add_state_arguments(convert_p)
    convert_p.set_defaults(func=cmd_convert)

    # --- labels ---
    labels_p = subparsers.add_parser("labels", help="Show source and destination units")
    _add_state_arguments(labels_p)
    labels_p.set_defaults(func=cmd_labels)

    # --- categories ---
    categories_p = subparsers.add_parser("categories", help="List unit pairs")
    categories_p.set_defaults(func=cmd_categories)

    # --- interactive ---
    interactive_p = subparsers.add_parser("interactive", help="Convert values interactively")
    _add_state_arguments(interactive_p)
    interactive_p.set_defaults(func=cmd_interactive)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)

    # argparse reads values like -1e3 or -inf as flags
    if (args.command == "convert" and args.value is None and len(extras) == 1
            and parse_value(extras[0]) is not None):
        args.value = extras.pop()
    if extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    if args.command == "convert" and args.value is None:
        parser.error("the following arguments are required: value")

    if args.verbose:
        setup_logger("DEBUG")
    else:
        setup_logger()

    if not args.command:
        parser.print_help()
        return 0

    logger.debug("Running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
