# curtois/decoders.py
from __future__ import annotations

import re
from typing import NamedTuple, Optional

from curtois.config import ParserConfig, cfg
from curtois.errors import FieldCountError, FieldFormatError
from curtois.instance import Request, Requirement, Shift, Staff
from curtois.sections import Section

_INT_RE = re.compile(r"[+-]?[0-9]+")


class Row(NamedTuple):
    """One data line together with where it came from."""

    section: Section
    text: str
    number: Optional[int] = None
    source: Optional[str] = None

    def where(self) -> dict:
        """Keyword arguments locating this row in an `InstanceError`."""
        return {
            "section": self.section.value,
            "line": self.text,
            "line_number": self.number,
            "source": self.source,
        }


def _fields(
    row: Row, required: int, optional: int = 0, C: ParserConfig = cfg
) -> list[str]:
    """
    Split a row on the field delimiter and strip each field.

    Rows shorter than `required` fail; fields past `required + optional` are
    only tolerated when empty (e.g. a trailing comma).
    """
    parts = [p.strip() for p in row.text.split(C.FIELD_DELIMITER)]
    if len(parts) < required:
        raise FieldCountError(
            f"expected at least {required} fields, found {len(parts)}",
            **row.where(),
        )
    limit = required + optional
    if any(parts[limit:]):
        raise FieldCountError(
            f"expected at most {limit} fields, found {len(parts)}",
            **row.where(),
        )
    return parts[:limit] + [""] * (limit - len(parts[:limit]))


def _int(value: str, name: str, row: Row) -> int:
    if not _INT_RE.fullmatch(value):
        raise FieldFormatError(
            f"{name} must be an integer, got {value!r}", **row.where()
        )
    try:
        return int(value)
    except ValueError as exc:
        raise FieldFormatError(
            f"{name} has too many digits ({len(value)})", **row.where()
        ) from exc


def _ident(value: str, name: str, row: Row) -> str:
    if not value:
        raise FieldFormatError(f"{name} must not be empty", **row.where())
    return value


def decode_horizon(row: Row, C: ParserConfig = cfg) -> int:
    (value,) = _fields(row, 1, C=C)
    horizon = _int(value, "horizon", row)
    if horizon < 0:
        raise FieldFormatError("horizon must be >= 0", **row.where())
    return horizon


def decode_shift(row: Row, C: ParserConfig = cfg) -> Shift:
    """`id,length[,succ1|succ2|...]`"""
    shift_id, length_raw, succ_raw = _fields(row, 2, optional=1, C=C)
    length = _int(length_raw, "length", row)
    if length <= 0:
        raise FieldFormatError("length must be > 0", **row.where())
    successors: list[str] = []
    if succ_raw:
        successors = [
            _ident(s.strip(), "forbidden successor", row)
            for s in succ_raw.split(C.LIST_DELIMITER)
        ]
    return Shift(
        id=_ident(shift_id, "shift id", row),
        length=length,
        forbidden_successors=successors,
    )


def decode_max_shifts(value: str, row: Row, C: ParserConfig = cfg) -> dict[str, int]:
    """`E1=5|L1=2` -> {"E1": 5, "L1": 2}; an empty field means no shift types."""
    out: dict[str, int] = {}
    if not value:
        return out
    for item in value.split(C.LIST_DELIMITER):
        pair = [p.strip() for p in item.split(C.PAIR_DELIMITER)]
        if len(pair) != 2:
            raise FieldCountError(
                f"max shifts entry {item!r} must be <shift>{C.PAIR_DELIMITER}<count>",
                **row.where(),
            )
        shift_id = _ident(pair[0], "max shifts shift id", row)
        out[shift_id] = _int(pair[1], f"max shifts for {shift_id}", row)
    return out


_STAFF_LIMITS = (
    "max_minutes",
    "min_minutes",
    "max_consecutive_shifts",
    "min_consecutive_shifts",
    "min_consecutive_days_off",
    "max_weekends",
)


def decode_staff(row: Row, C: ParserConfig = cfg) -> Staff:
    parts = _fields(row, 2 + len(_STAFF_LIMITS), C=C)
    limits = {
        name: _int(raw, name, row) for name, raw in zip(_STAFF_LIMITS, parts[2:])
    }
    return Staff(
        id=_ident(parts[0], "staff id", row),
        max_shifts=decode_max_shifts(parts[1], row, C),
        **limits,
    )


def decode_days_off(row: Row, C: ParserConfig = cfg) -> tuple[str, list[int]]:
    """
    `staffid,day1,day2,...` with any number of days (including none).
    """
    parts = [p.strip() for p in row.text.split(C.FIELD_DELIMITER)]
    staff_id = _ident(parts[0], "staff id", row)
    days = [_int(p, "day", row) for p in parts[1:] if p]
    return staff_id, days


def decode_request(row: Row, C: ParserConfig = cfg) -> Request:
    staff_id, day, shift_id, weight = _fields(row, 4, C=C)
    return Request(
        staff_id=_ident(staff_id, "staff id", row),
        day=_int(day, "day", row),
        shift_id=_ident(shift_id, "shift id", row),
        weight=_int(weight, "weight", row),
    )


def decode_requirement(row: Row, C: ParserConfig = cfg) -> Requirement:
    day, shift_id, required, under, over = _fields(row, 5, C=C)
    return Requirement(
        day=_int(day, "day", row),
        shift_id=_ident(shift_id, "shift id", row),
        required=_int(required, "required", row),
        cost_under=_int(under, "cost under", row),
        cost_over=_int(over, "cost over", row),
    )
