"""Strategies for picking one movie out of several partial matches."""

from typing import Callable

from .errors import AmbiguousError
from .models import Entry


class SelectionStrategy:
    """Given more than one match, return the chosen entry or None if cancelled."""

    def choose_one(self, matches: list[Entry], query: str, action: str) -> Entry | None:
        raise NotImplementedError


class InteractiveSelection(SelectionStrategy):
    """Lists the matches with 1-based numbers and reads a choice from the user."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 echo: Callable[[str], None] = print):
        self.input_fn = input_fn
        self.echo = echo

    def choose_one(self, matches: list[Entry], query: str, action: str) -> Entry | None:
        self.echo(f"  ! Multiple matches found for '{query}':")
        for i, entry in enumerate(matches, 1):
            self.echo(f"    {i}. {entry.label()}")
        try:
            choice = self.input_fn(f"Enter the number of the movie you wish to {action}: ")
        except EOFError:
            return None
        try:
            index = int(choice.strip().rstrip(".")) - 1
        except ValueError:
            return None
        if 0 <= index < len(matches):
            return matches[index]
        return None


class HeadlessSelection(SelectionStrategy):
    """Never picks: ambiguity is an error when nobody can be asked."""

    def choose_one(self, matches: list[Entry], query: str, action: str) -> Entry | None:
        raise AmbiguousError(f"Multiple matches found for '{query}'.")
