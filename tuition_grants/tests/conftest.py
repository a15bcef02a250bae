"""Pytest configuration and fixtures."""

import pytest

from tuition_grants.config import validate_config
from tuition_grants.console import Prompter
from tuition_grants.store import ApplicationStore


class ScriptedConsole:
    """Stands in for input()/print() with a fixed list of answers.

    Raises EOFError once the answers run out, like input() at end of file.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, text=""):
        self.output.append(text)

    @property
    def text(self):
        return "\n".join(self.output)

    def prompter(self):
        return Prompter(input_fn=self.input, output_fn=self.print)


@pytest.fixture
def scripted_console():
    """Factory for ScriptedConsole instances."""
    return ScriptedConsole


@pytest.fixture
def plain_config():
    """Config with screen clearing and colour off, so output is easy to assert on."""
    return validate_config(clear_screen=False, use_color=False)


@pytest.fixture
def sample_store():
    """Store holding one applicant for each outcome.

    UL1000 Alice: 3.6 / 15000  -> shortlisted, 80 + 80 = 160, 75%
    UL1001 Bob:   2.0 / 5000   -> rejected (GPA and shortfall)
    UL1002 Cara:  3.8 / 10000  -> shortlisted, 100 + 100 = 200, full grant
    UL1003 Dev:   2.7 / 45000  -> shortlisted, 20 + 20 = 40, 50%
    UL1004 Eve:   3.9 / 8000   -> rejected (shortfall below 10000)
    """
    store = ApplicationStore()
    store.add("Alice", 3.6, 15000)
    store.add("Bob", 2.0, 5000)
    store.add("Cara", 3.8, 10000)
    store.add("Dev", 2.7, 45000)
    store.add("Eve", 3.9, 8000)
    return store
