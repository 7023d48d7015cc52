"""Turn handling: command parsing, reply construction, dispatch and running."""

from ebobot.bot.commands import Command, parse_command
from ebobot.bot.dispatcher import TurnDispatcher
from ebobot.bot.runner import SendCallback, TurnRunner

__all__ = [
    "Command",
    "SendCallback",
    "TurnDispatcher",
    "TurnRunner",
    "parse_command",
]
