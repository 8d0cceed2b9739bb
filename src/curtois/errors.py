# curtois/errors.py
from __future__ import annotations

from typing import Optional


class InstanceError(Exception):
    """
    Base class for every failure raised while reading an instance file.

    Carries where the failure happened so callers can report it without
    re-reading the file.
    """

    def __init__(
        self,
        message: str,
        *,
        section: Optional[str] = None,
        line: Optional[str] = None,
        line_number: Optional[int] = None,
        source: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.section = section
        self.line = line
        self.line_number = line_number
        self.source = source

    def __str__(self) -> str:
        where: list[str] = []
        if self.source:
            where.append(str(self.source))
        if self.line_number is not None:
            where.append(f"line {self.line_number}")
        if self.section:
            where.append(f"section {self.section}")
        out = f"{', '.join(where)}: {self.message}" if where else self.message
        if self.line is not None:
            out += f" (got {self.line!r})"
        return out


class InstanceReadError(InstanceError):
    """The file could not be opened, read or decoded."""


class StructuralError(InstanceError):
    """Sections are missing, out of order or not terminated."""


class DuplicateEntryError(StructuralError):
    """An identifier appears twice in a collection that requires unique ids."""


class FieldCountError(InstanceError):
    """A row has fewer (or more) fields than its grammar allows."""


class FieldFormatError(InstanceError, ValueError):
    """A field does not hold a value of the expected shape (e.g. an integer)."""
