"""Unit tests for datebucket.cli.prompt."""

from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from conftest import TS_2024_01_05
from datebucket.cli.prompt import PromptSession, SessionOutcome, strip_quotes
from datebucket.core.organizer import Organizer
from datebucket.core.scanner import Scanner


class TestStripQuotes:
    """Tests for strip_quotes."""

    def test_plain_path(self):
        assert strip_quotes("/home/user/photos") == "/home/user/photos"

    def test_trims_whitespace_and_newline(self):
        assert strip_quotes("  /home/user/photos \n") == "/home/user/photos"

    def test_strips_one_outer_quote_pair(self):
        assert strip_quotes("'/home/user/my photos'") == "/home/user/my photos"

    def test_quotes_inside_whitespace(self):
        assert strip_quotes("  '/home/user/photos'  \n") == "/home/user/photos"

    def test_only_outer_pair_removed(self):
        assert strip_quotes("''/tmp/x''") == "'/tmp/x'"

    def test_inner_text_not_unescaped(self):
        assert strip_quotes("'/tmp/it'\\''s'") == "/tmp/it'\\''s"

    def test_whitespace_inside_quotes_kept(self):
        assert strip_quotes("' /tmp/x '") == " /tmp/x "

    @pytest.mark.parametrize("raw", ["'/tmp/x", "/tmp/x'", '"/tmp/x"', "'"])
    def test_unmatched_quotes_preserved(self, raw: str):
        assert strip_quotes(raw) == raw

    def test_empty_input(self):
        assert strip_quotes("   \n") == ""

    def test_empty_quotes(self):
        assert strip_quotes("''") == ""


def _console() -> Console:
    return Console(file=StringIO(), width=200)


def _lines(*lines: str):
    feed = iter(lines)
    return lambda: next(feed)


class TestPromptSession:
    """Tests for PromptSession.run."""

    def test_two_empty_inputs_say_goodbye(self):
        console = _console()
        scanner = MagicMock(spec=Scanner)
        organizer = MagicMock(spec=Organizer)

        session = PromptSession(console, scanner, organizer, read_line=_lines("", "  "))
        outcome = session.run()

        assert isinstance(outcome, SessionOutcome)
        assert outcome.completed is False
        assert outcome.attempts == 2
        scanner.scan.assert_not_called()
        organizer.organize.assert_not_called()
        output = console.file.getvalue()
        assert "Input was empty, try again." in output
        assert output.rstrip().endswith("Goodbye")

    def test_prompt_is_multi_line(self):
        console = _console()

        PromptSession(
            console, MagicMock(spec=Scanner), MagicMock(spec=Organizer),
            read_line=_lines("", ""),
        ).run()

        output = console.file.getvalue()
        assert output.count("Drag and drop needed folder") == 2
        assert "Let's do it:" in output

    def test_scan_failures_count_toward_budget(self, temp_dir: Path):
        console = _console()
        organizer = MagicMock(spec=Organizer)

        session = PromptSession(
            console, Scanner(), organizer,
            read_line=_lines(str(temp_dir / "nope"), str(temp_dir / "still_nope")),
        )
        outcome = session.run()

        assert outcome.attempts == 2
        assert outcome.completed is False
        organizer.organize.assert_not_called()
        output = console.file.getvalue()
        assert "Failed to read folder." in output
        assert "Invalid path, try again." in output
        assert "Goodbye" in output

    def test_empty_then_failed_scan_exhausts_budget(self, temp_dir: Path):
        session = PromptSession(
            _console(), Scanner(), MagicMock(spec=Organizer),
            read_line=_lines("", str(temp_dir / "nope")),
        )

        assert session.run().attempts == 2

    def test_retry_then_success(self, photo_and_notes: Path, stub_reader):
        scanner = Scanner(stub_reader({}, default=TS_2024_01_05))

        session = PromptSession(
            _console(), scanner, Organizer(),
            read_line=_lines("", f"'{photo_and_notes}'\n"),
        )
        outcome = session.run()

        assert outcome.completed is True
        assert outcome.attempts == 1
        assert outcome.source == photo_and_notes
        assert outcome.result.moved_count == 1
        assert (photo_and_notes / "2024.01.05" / "photo.jpg").exists()

    def test_success_runs_only_once(self, source_dir: Path, stub_reader):
        read_line = MagicMock(return_value=str(source_dir))
        organizer = MagicMock(spec=Organizer)

        PromptSession(
            _console(), Scanner(stub_reader({})), organizer, read_line=read_line,
        ).run()

        assert read_line.call_count == 1
        organizer.organize.assert_called_once()

    def test_custom_attempt_budget(self):
        read_line = MagicMock(return_value="")

        outcome = PromptSession(
            _console(), MagicMock(spec=Scanner), MagicMock(spec=Organizer),
            max_attempts=3, read_line=read_line,
        ).run()

        assert outcome.attempts == 3
        assert read_line.call_count == 3

    def test_end_of_input_counts_as_empty(self, monkeypatch):
        console = _console()

        def _eof(*args, **kwargs):
            raise EOFError

        monkeypatch.setattr(console, "input", _eof)

        outcome = PromptSession(
            console, MagicMock(spec=Scanner), MagicMock(spec=Organizer),
        ).run()

        assert outcome.attempts == 2
        assert "Goodbye" in console.file.getvalue()
