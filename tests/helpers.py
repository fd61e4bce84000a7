"""Shared test helpers.

Import from here instead of duplicating wrappers and invariant checks in
individual test files.
"""

from __future__ import annotations

from typing import Callable, Iterable

from tincture.core.ranges import ColorRange


def make_wrapper(width: int) -> Callable[[str], str]:
    """Return a greedy wrapper that only turns spaces into newlines or inserts breaks.

    Lines break at the first space once ``width`` characters are placed; words
    running past ``2 * width`` characters get a newline inserted mid-word.
    """

    hard_limit = width * 2

    def wrap(text: str) -> str:
        out: list[str] = []
        column = 0
        for char in text:
            if char == "\n":
                out.append(char)
                column = 0
                continue
            if char == " " and column >= width:
                out.append("\n")
                column = 0
                continue
            if column >= hard_limit:
                out.append("\n")
                column = 0
            out.append(char)
            column += 1
        return "".join(out)

    return wrap


def assert_canonical(ranges: Iterable[ColorRange] | None) -> None:
    """Assert ``ranges`` are sorted, non-empty, disjoint and merged."""

    items = list(ranges or ())
    for entry in items:
        assert entry.start < entry.end, entry
    for previous, current in zip(items, items[1:]):
        assert previous.end <= current.start, (previous, current)
        if previous.color == current.color:
            assert previous.end < current.start, (previous, current)


def spans(ranges: Iterable[ColorRange] | None) -> list[tuple[int, int, str]]:
    return [entry.to_tuple() for entry in ranges or ()]
