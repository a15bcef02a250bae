"""Interactive menu session."""

import logging
from typing import Callable, Dict, Optional

from .. import __version__
from ..config import Config, DEFAULT_THRESHOLDS, ScoringThresholds
from ..errors import CapacityExceeded
from ..reporter import (
    ApplicationReportGenerator,
    format_awardees,
    format_entry_header,
    format_menu,
    format_splash,
    format_summary,
)
from ..store import ApplicationStore
from .prompts import Prompter

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"
CAPACITY_MESSAGE = "Maximum number of students reached. Cannot add more applications."
EXIT_MESSAGE = "\n\n<Exiting Application>"


class GrantSession:
    """One interactive session over an in-memory application store.

    Menu commands run to completion one at a time until X (or end of
    input) ends the session.
    """

    def __init__(
        self,
        config: Config,
        prompter: Optional[Prompter] = None,
        thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
        store: Optional[ApplicationStore] = None,
    ):
        self.config = config
        self.prompter = prompter or Prompter()
        self.store = store if store is not None else ApplicationStore(capacity=config.max_applications)
        self.reports = ApplicationReportGenerator(
            self.store,
            thresholds=thresholds,
            number_prefix=config.application_number_prefix,
            number_offset=config.application_number_offset,
        )
        self._commands: Dict[str, Callable[[], None]] = {
            "A": self.enter_applications,
            "B": self.show_summary,
            "C": self.show_awardees,
        }

    def run(self) -> None:
        """Show the splash screen, then serve menu commands until exit."""
        logger.info("session_started capacity=%d", self.store.capacity)
        try:
            self.show_splash()
            while True:
                self._clear()
                self._out(format_menu(self.config.use_color))
                option = self.prompter.ask_menu_option()
                if option == "X":
                    break
                self._commands[option]()
        except (EOFError, KeyboardInterrupt):
            logger.info("session_interrupted count=%d", self.store.count())
        self._out(EXIT_MESSAGE)
        logger.info("session_ended count=%d", self.store.count())

    def show_splash(self) -> None:
        self._out(format_splash(__version__, self.config.use_color))
        self.prompter.pause(message=None)

    def enter_applications(self) -> None:
        """Collect applications until the user answers N or the store fills."""
        cap = self.config.effective_shortfall_cap
        while not self.store.is_full():
            self._clear()
            self._out(format_entry_header(self.store.count()))

            name = self.prompter.ask_name()
            gpa = self.prompter.ask_gpa()
            shortfall = self.prompter.ask_shortfall(cap)

            try:
                self.store.add(name, gpa, shortfall)
            except CapacityExceeded:
                break

            if not self.prompter.confirm_another():
                break

        if self.store.is_full():
            self._out(CAPACITY_MESSAGE)

        self.prompter.pause()

    def show_summary(self) -> None:
        self._clear()
        self._out(format_summary(self.reports.summary()))
        self.prompter.pause()
        self._clear()

    def show_awardees(self) -> None:
        self._clear()
        self._out(format_awardees(self.reports.awardees()))
        self.prompter.pause()
        self._clear()

    def _out(self, text: str) -> None:
        self.prompter.output_fn(text)

    def _clear(self) -> None:
        if self.config.clear_screen:
            self._out(CLEAR_SCREEN)
