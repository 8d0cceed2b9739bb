from __future__ import annotations

from curtois.sections import SECTION_ORDER, Section, section_for_header


def test_section_order_and_terminators() -> None:
    assert [s.value for s in SECTION_ORDER] == [
        "HORIZON",
        "SHIFTS",
        "STAFF",
        "DAYS_OFF",
        "SHIFT_ON_REQUESTS",
        "SHIFT_OFF_REQUESTS",
        "COVER",
    ]
    assert Section.SHIFTS.terminator() == "SECTION_STAFF"
    assert Section.SHIFT_OFF_REQUESTS.terminator() == "SECTION_COVER"


def test_cover_is_terminal() -> None:
    assert Section.COVER.is_terminal
    assert Section.COVER.terminator() is None
    assert Section.COVER.next is Section.END
    assert not Section.STAFF.is_terminal


def test_section_for_header() -> None:
    assert section_for_header("SECTION_DAYS_OFF") is Section.DAYS_OFF
    assert section_for_header("SECTION_END") is None
    assert section_for_header("SECTION_UNKNOWN") is None
    assert section_for_header("A,1,2") is None
