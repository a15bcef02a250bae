"""Prompt -> validated value boundary for console input.

Parsers turn raw text into values or raise InvalidInputFormat /
OutOfDomain with the message to show the user. Prompter keeps asking until
a parser accepts the answer.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional, TypeVar

from ..errors import InvalidInputFormat, OutOfDomain
from ..reporter.formatters import PRESS_ENTER

logger = logging.getLogger(__name__)

T = TypeVar("T")

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MIN_GPA = 0.0
MAX_GPA = 4.0
MENU_OPTIONS = ("A", "B", "C", "X")

NAME_PROMPT = "Enter Student's Name: "
GPA_PROMPT = "Enter Student GPA (0.0 - 4.0): "
SHORTFALL_PROMPT = "Enter Student Tuition Shortfall ($): "
ANOTHER_PROMPT = "\nDo you want to add another application? [ Y/N ]: "
OPTION_PROMPT = "\nEnter your option: "

EMPTY_NAME_MESSAGE = "Student name cannot be empty. Please enter a valid name."
INVALID_GPA_MESSAGE = "Invalid GPA. Please enter a value between 0.0 and 4.0."
INVALID_OPTION_MESSAGE = "Invalid option. Please enter A, B, C, or X."


def _shortfall_message(cap: Optional[float]) -> str:
    if cap is None:
        return "Invalid shortfall. Please enter a non-negative value."
    return f"Invalid shortfall. Please enter a value between 0 and {cap:g}."


def _strip_terminator(text: str) -> str:
    return text.rstrip("\r\n")


def _parse_number(text: str, message: str) -> float:
    try:
        value = float(text.strip())
    except ValueError as exc:
        raise InvalidInputFormat(message) from exc
    if not math.isfinite(value):
        raise InvalidInputFormat(message)
    return value


def parse_name(text: str) -> str:
    """Student name with only the line terminator removed."""
    name = _strip_terminator(text)
    if not name:
        raise OutOfDomain(EMPTY_NAME_MESSAGE)
    return name


def parse_gpa(text: str) -> float:
    gpa = _parse_number(text, INVALID_GPA_MESSAGE)
    if not MIN_GPA <= gpa <= MAX_GPA:
        raise OutOfDomain(INVALID_GPA_MESSAGE)
    return gpa


def parse_shortfall(text: str, cap: Optional[float] = None) -> float:
    """Tuition shortfall in dollars.

    Args:
        text: Raw answer
        cap: Largest accepted value, or None for no upper bound
    """
    message = _shortfall_message(cap)
    shortfall = _parse_number(text, message)
    if shortfall < 0 or (cap is not None and shortfall > cap):
        raise OutOfDomain(message)
    return shortfall


def parse_menu_option(text: str) -> str:
    option = text.strip().upper()
    if option not in MENU_OPTIONS:
        raise OutOfDomain(INVALID_OPTION_MESSAGE)
    return option


class Prompter:
    """Asks questions through injectable input/output callables.

    EOFError and KeyboardInterrupt from the input callable propagate so the
    session can shut down.
    """

    def __init__(self, input_fn: InputFn = input, output_fn: OutputFn = print):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def ask(self, prompt: str, parse: Callable[[str], T]) -> T:
        """Prompt until `parse` accepts the answer."""
        while True:
            answer = self.input_fn(prompt)
            try:
                return parse(answer)
            except (InvalidInputFormat, OutOfDomain) as exc:
                logger.debug("input_rejected prompt=%r error=%s", prompt.strip(), type(exc).__name__)
                self.output_fn(str(exc))

    def ask_name(self) -> str:
        return self.ask(NAME_PROMPT, parse_name)

    def ask_gpa(self) -> float:
        return self.ask(GPA_PROMPT, parse_gpa)

    def ask_shortfall(self, cap: Optional[float] = None) -> float:
        return self.ask(SHORTFALL_PROMPT, lambda text: parse_shortfall(text, cap))

    def ask_menu_option(self) -> str:
        return self.ask(OPTION_PROMPT, parse_menu_option)

    def confirm_another(self) -> bool:
        """Only an explicit N stops entry."""
        return self.input_fn(ANOTHER_PROMPT).strip().upper() != "N"

    def pause(self, message: Optional[str] = f"\n\n{PRESS_ENTER}") -> None:
        if message:
            self.output_fn(message)
        self.input_fn("")
