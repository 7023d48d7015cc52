"""Recognized message commands.

Matching is exact and case-insensitive; anything else is not a command
and goes down the turn-counter echo path.
"""

from enum import Enum


class Command(str, Enum):
    """Closed set of utterances the bot reacts to specially."""

    HELLO = "hello"
    HI = "hi"
    IMAGE = "image"
    CARD = "card"


GREETINGS: frozenset[Command] = frozenset({Command.HELLO, Command.HI})


def parse_command(text: str | None) -> Command | None:
    """Return the command for a message text, or None if unrecognized."""
    try:
        return Command((text or "").lower())
    except ValueError:
        return None
