"""
Shared console menu loop.

Each portal console subclasses ``ConsoleMenu``, declares its title and menu
options and implements one method per option. Input and output go through
injectable callables so the consoles can be driven from tests.
"""

import logging
from datetime import date
from typing import Callable, List, Optional, Sequence, Tuple

from pymongo.errors import PyMongoError

from portals.exceptions import InvalidInputError, PortalError
from portals.models.base import parse_date

logger = logging.getLogger(__name__)

MenuOption = Tuple[str, str, Optional[Callable[[], None]]]


def parse_skills(raw: str) -> List[str]:
    """Split a comma separated skill list, dropping empty entries."""
    if not raw or not raw.strip():
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


class ConsoleMenu:
    """
    Numbered menu loop around a repository.

    Subclasses set ``title`` and return their options from ``options()``;
    an option whose handler is ``None`` exits the loop.
    """

    title = ""
    exit_message = "Exiting."

    def __init__(self, input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print):
        self._input = input_fn
        self._output = output_fn

    def options(self) -> Sequence[MenuOption]:
        raise NotImplementedError

    def say(self, message: str = "") -> None:
        self._output(message)

    def ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def ask_int(self, prompt: str) -> int:
        raw = self.ask(prompt)
        try:
            return int(raw)
        except ValueError:
            raise InvalidInputError(f"Not a valid number: {raw!r}")

    def ask_float(self, prompt: str) -> float:
        raw = self.ask(prompt)
        try:
            return float(raw)
        except ValueError:
            raise InvalidInputError(f"Not a valid amount: {raw!r}")

    def ask_bool(self, prompt: str) -> bool:
        return self.ask(prompt).lower() in ("true", "yes", "y", "1")

    def ask_date(self, prompt: str, required: bool = True) -> Optional[date]:
        raw = self.ask(prompt)
        if not raw and not required:
            return None
        return parse_date(raw)

    def print_menu(self) -> None:
        self.say()
        self.say(f"{self.title}:")
        for key, label, _ in self.options():
            self.say(f"{key}. {label}")

    def run(self) -> None:
        """
        Run the menu until the exit option is chosen or input ends.

        Domain and database errors are reported and the loop continues.
        """
        handlers = {key: handler for key, _, handler in self.options()}
        while True:
            self.print_menu()
            try:
                choice = self.ask("Select option: ")
            except EOFError:
                self.say(self.exit_message)
                return

            if choice not in handlers:
                self.say("Invalid option.")
                continue

            handler = handlers[choice]
            if handler is None:
                self.say(self.exit_message)
                return

            try:
                handler()
            except EOFError:
                self.say(self.exit_message)
                return
            except PortalError as e:
                self.say(f"Error: {e}")
            except PyMongoError as e:
                logger.error(f"Database error in {self.title}: {str(e)}", exc_info=True)
                self.say(f"Unexpected error occurred: {e}")
