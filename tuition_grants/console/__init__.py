"""Console front end: prompts and the interactive menu session."""

from .prompts import (
    Prompter,
    parse_gpa,
    parse_menu_option,
    parse_name,
    parse_shortfall,
)
from .session import GrantSession

__all__ = [
    "GrantSession",
    "Prompter",
    "parse_gpa",
    "parse_menu_option",
    "parse_name",
    "parse_shortfall",
]
