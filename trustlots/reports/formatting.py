"""Shared Jinja environment and number formatting for text reports."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

TEMPLATE_DIR = Path(__file__).parent / "templates"


def fixed(value: Decimal, width: int, places: int) -> str:
    """Right-align ``value`` with ``places`` decimals, formatted as a Decimal.

    Jinja's ``format`` filter goes through ``%``, which turns a Decimal into
    a float and loses digits past about 16 significant figures.
    """
    return format(value, f"{width}.{places}f")


def build_environment() -> Environment:
    env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), trim_blocks=True)
    env.filters["fixed"] = fixed
    return env
