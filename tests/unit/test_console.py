"""Tests for log value formatting in mockfunc/console.py."""

from mockfunc.console import format_value, truncate_text


class Unprintable:
    def __repr__(self) -> str:
        raise RuntimeError("no repr")


def test_truncate_text_adds_ellipsis() -> None:
    assert truncate_text("abcdef", 3) == "abc..."
    assert truncate_text("abc", 3) == "abc"


def test_format_value_uses_repr() -> None:
    assert format_value(("https://x", 7)) == "('https://x', 7)"


def test_format_value_truncates_long_values() -> None:
    assert format_value("x" * 50, 10) == repr("x" * 50)[:10] + "..."


def test_format_value_verbose_keeps_full_text() -> None:
    assert format_value("x" * 50, 10, verbose=True) == repr("x" * 50)


def test_format_value_escapes_newlines() -> None:
    class Multiline:
        def __repr__(self) -> str:
            return "a\nb"

    assert format_value(Multiline()) == "a\\nb"


def test_format_value_survives_failing_repr() -> None:
    assert format_value(Unprintable()) == "<Unprintable (repr failed)>"
