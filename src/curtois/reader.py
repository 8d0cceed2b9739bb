from __future__ import annotations

from typing import Iterable, Iterator


class EntryReader:
    """
    Yield the meaningful lines of an instance file one at a time.

    Blank lines and comment lines are skipped. Lines are handed out stripped
    and never twice.
    """

    def __init__(self, lines: Iterable[str], comment_marker: str = "#") -> None:
        self._lines: Iterator[str] = iter(lines)
        self._comment_marker = comment_marker
        self._physical = 0
        self.line_number = 0

    def next_entry(self) -> tuple[str, bool]:
        """
        Return (line, True) for the next data entry, or ("", False) once the
        input is exhausted.
        """
        for raw in self._lines:
            self._physical += 1
            line = raw.strip()
            if not line or line.startswith(self._comment_marker):
                continue
            self.line_number = self._physical
            return line, True
        self.line_number = self._physical
        return "", False

    def __iter__(self) -> Iterator[str]:
        while True:
            line, more = self.next_entry()
            if not more:
                return
            yield line
