from __future__ import annotations

from enum import Enum
from typing import Optional


class Section(Enum):
    """
    The sections of an instance file, in the only order they may appear.

    A section's value is the name used in its header line
    (`SECTION_<value>`); a section ends where the next one's header starts.
    """

    HORIZON = "HORIZON"
    SHIFTS = "SHIFTS"
    STAFF = "STAFF"
    DAYS_OFF = "DAYS_OFF"
    SHIFT_ON_REQUESTS = "SHIFT_ON_REQUESTS"
    SHIFT_OFF_REQUESTS = "SHIFT_OFF_REQUESTS"
    COVER = "COVER"
    END = "END"

    def header(self, prefix: str = "SECTION_") -> str:
        return f"{prefix}{self.value}"

    @property
    def next(self) -> Section:
        order = list(Section)
        idx = order.index(self)
        return order[min(idx + 1, len(order) - 1)]

    @property
    def is_terminal(self) -> bool:
        """COVER runs to end-of-input and has no terminator line."""
        return self.next is Section.END

    def terminator(self, prefix: str = "SECTION_") -> Optional[str]:
        if self is Section.END or self.is_terminal:
            return None
        return self.next.header(prefix)


SECTION_ORDER: tuple[Section, ...] = tuple(s for s in Section if s is not Section.END)


def section_for_header(line: str, prefix: str = "SECTION_") -> Optional[Section]:
    """Return the section introduced by `line`, or None if it is not a known header."""
    if not line.startswith(prefix):
        return None
    name = line[len(prefix) :]
    for s in SECTION_ORDER:
        if s.value == name:
            return s
    return None
