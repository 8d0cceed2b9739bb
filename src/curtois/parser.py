# curtois/parser.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from curtois.config import ParserConfig, cfg
from curtois.decoders import (
    Row,
    decode_days_off,
    decode_horizon,
    decode_request,
    decode_requirement,
    decode_shift,
    decode_staff,
)
from curtois.errors import DuplicateEntryError, InstanceReadError, StructuralError
from curtois.instance import Instance, Request, Requirement, Shift, Staff
from curtois.reader import EntryReader
from curtois.sections import Section, section_for_header


@dataclass
class InstanceBuilder:
    """
    Collects decoded rows while a file is being read. Only `build()` hands out
    an `Instance`, and only once every section has been read.
    """

    horizon: Optional[int] = None
    shifts: list[Shift] = field(default_factory=list)
    staff: list[Staff] = field(default_factory=list)
    days_off: dict[str, list[int]] = field(default_factory=dict)
    shift_on_requests: list[Request] = field(default_factory=list)
    shift_off_requests: list[Request] = field(default_factory=list)
    cover: list[Requirement] = field(default_factory=list)

    def add_shift(self, shift: Shift, row: Row) -> None:
        if any(s.id == shift.id for s in self.shifts):
            raise DuplicateEntryError(
                f"duplicate shift id {shift.id!r}", **row.where()
            )
        self.shifts.append(shift)

    def add_staff(self, member: Staff, row: Row) -> None:
        if any(s.id == member.id for s in self.staff):
            raise DuplicateEntryError(
                f"duplicate staff id {member.id!r}", **row.where()
            )
        self.staff.append(member)

    def add_days_off(self, staff_id: str, days: list[int], row: Row) -> None:
        if staff_id in self.days_off:
            raise DuplicateEntryError(
                f"days off for {staff_id!r} listed twice", **row.where()
            )
        self.days_off[staff_id] = days

    def build(self) -> Instance:
        if self.horizon is None:
            raise StructuralError("no horizon was read", section=Section.HORIZON.value)
        return Instance(
            horizon=self.horizon,
            shifts=list(self.shifts),
            staff=list(self.staff),
            days_off={k: list(v) for k, v in self.days_off.items()},
            shift_on_requests=list(self.shift_on_requests),
            shift_off_requests=list(self.shift_off_requests),
            cover=list(self.cover),
        )


def _rows(
    reader: EntryReader,
    section: Section,
    C: ParserConfig,
    source: Optional[str],
) -> Iterator[Row]:
    """
    Yield the data rows of `section` and stop at its terminator.

    Reaching end-of-input is only fine for the terminal section; meeting any
    other section header means the file is out of order.
    """
    terminator = section.terminator(C.SECTION_PREFIX)
    while True:
        line, more = reader.next_entry()
        if not more:
            if terminator is None:
                return
            raise StructuralError(
                f"end of input before {terminator}",
                section=section.value,
                line_number=reader.line_number,
                source=source,
            )
        if line == terminator:
            return
        if line.startswith(C.SECTION_PREFIX):
            found = section_for_header(line, C.SECTION_PREFIX)
            expected = terminator or "end of input"
            kind = "out of order" if found is not None else "unknown section"
            raise StructuralError(
                f"{kind} header, expected {expected}",
                section=section.value,
                line=line,
                line_number=reader.line_number,
                source=source,
            )
        yield Row(section, line, reader.line_number, source)


# ----------------------------
# Section handlers
# ----------------------------
SectionHandler = Callable[[Row, InstanceBuilder, ParserConfig], None]


def _read_horizon(row: Row, b: InstanceBuilder, C: ParserConfig) -> None:
    if b.horizon is not None:
        raise StructuralError(
            "horizon section holds more than one value", **row.where()
        )
    b.horizon = decode_horizon(row, C)


def _read_shift(row: Row, b: InstanceBuilder, C: ParserConfig) -> None:
    b.add_shift(decode_shift(row, C), row)


def _read_staff(row: Row, b: InstanceBuilder, C: ParserConfig) -> None:
    b.add_staff(decode_staff(row, C), row)


def _read_days_off(row: Row, b: InstanceBuilder, C: ParserConfig) -> None:
    staff_id, days = decode_days_off(row, C)
    b.add_days_off(staff_id, days, row)


def _read_on_request(row: Row, b: InstanceBuilder, C: ParserConfig) -> None:
    b.shift_on_requests.append(decode_request(row, C))


def _read_off_request(row: Row, b: InstanceBuilder, C: ParserConfig) -> None:
    b.shift_off_requests.append(decode_request(row, C))


def _read_cover(row: Row, b: InstanceBuilder, C: ParserConfig) -> None:
    b.cover.append(decode_requirement(row, C))


_HANDLERS: dict[Section, SectionHandler] = {
    Section.HORIZON: _read_horizon,
    Section.SHIFTS: _read_shift,
    Section.STAFF: _read_staff,
    Section.DAYS_OFF: _read_days_off,
    Section.SHIFT_ON_REQUESTS: _read_on_request,
    Section.SHIFT_OFF_REQUESTS: _read_off_request,
    Section.COVER: _read_cover,
}


def parse_entries(
    reader: EntryReader,
    config: ParserConfig | None = None,
    source: Optional[str] = None,
) -> Instance:
    """
    Drive the section state machine over `reader` and return the instance.

    Any malformed row aborts the whole parse with an `InstanceError`
    subclass; nothing partial is returned.
    """
    C = config or cfg
    C.validate()

    header = Section.HORIZON.header(C.SECTION_PREFIX)
    line, more = reader.next_entry()
    if not more or line != header:
        raise StructuralError(
            f"file must start with {header}",
            section=Section.HORIZON.value,
            line=line if more else None,
            line_number=reader.line_number,
            source=source,
        )

    builder = InstanceBuilder()
    state = Section.HORIZON
    while state is not Section.END:
        handler = _HANDLERS[state]
        for row in _rows(reader, state, C, source):
            handler(row, builder, C)
        if state is Section.HORIZON and builder.horizon is None:
            raise StructuralError(
                "horizon section holds no value",
                section=state.value,
                line_number=reader.line_number,
                source=source,
            )
        state = state.next
    return builder.build()


def parse_lines(
    lines: Iterable[str],
    config: ParserConfig | None = None,
    source: Optional[str] = None,
) -> Instance:
    C = config or cfg
    return parse_entries(EntryReader(lines, C.COMMENT_MARKER), C, source)


def parse_text(text: str, config: ParserConfig | None = None) -> Instance:
    """Parse an instance held in memory as one string."""
    return parse_lines(text.splitlines(), config)


def parse_instance(path: str | Path, config: ParserConfig | None = None) -> Instance:
    """
    Read the instance file at `path`.

    Parameters
    ----------
    path:
        Location of a Curtois 2014 text instance.
    config:
        Optional `ParserConfig`. Defaults to `curtois.config.cfg`.

    Returns
    -------
    Instance
        The fully populated instance.

    Raises
    ------
    InstanceReadError
        The file cannot be opened, read or decoded.
    StructuralError, FieldCountError, FieldFormatError
        The file content is malformed.
    """
    C = config or cfg
    C.validate()
    file_path = Path(path).expanduser()
    try:
        with file_path.open("r", encoding=C.ENCODING) as fh:
            return parse_lines(fh, C, source=str(file_path))
    except (OSError, UnicodeDecodeError) as exc:
        raise InstanceReadError(
            f"cannot read instance file: {exc}", source=str(file_path)
        ) from exc


def parse_curtois2014(path: str | Path) -> Instance:
    """Read a Curtois 2014 instance file with the default settings."""
    return parse_instance(path)


load_instance = parse_curtois2014
