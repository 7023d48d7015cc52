"""Tests for command parsing."""

import pytest

from ebobot.bot.commands import GREETINGS, Command, parse_command


class TestParseCommand:
    """Tests for parse_command."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("hello", Command.HELLO),
            ("HELLO", Command.HELLO),
            ("Hi", Command.HI),
            ("IMAGE", Command.IMAGE),
            ("card", Command.CARD),
        ],
    )
    def test_recognized(self, text: str, expected: Command) -> None:
        assert parse_command(text) is expected

    @pytest.mark.parametrize("text", ["intro", "hello there", " card", "", None])
    def test_unrecognized(self, text: str | None) -> None:
        assert parse_command(text) is None

    def test_greetings(self) -> None:
        assert GREETINGS == {Command.HELLO, Command.HI}
