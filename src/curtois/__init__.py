from .config import ParserConfig, cfg
from .errors import (
    DuplicateEntryError,
    FieldCountError,
    FieldFormatError,
    InstanceError,
    InstanceReadError,
    StructuralError,
)
from .instance import Instance, Request, Requirement, Shift, Staff
from .parser import (
    load_instance,
    parse_curtois2014,
    parse_instance,
    parse_lines,
    parse_text,
)

__all__ = [
    "ParserConfig",
    "cfg",
    "InstanceError",
    "InstanceReadError",
    "StructuralError",
    "DuplicateEntryError",
    "FieldCountError",
    "FieldFormatError",
    "Instance",
    "Shift",
    "Staff",
    "Request",
    "Requirement",
    "parse_curtois2014",
    "parse_instance",
    "parse_lines",
    "parse_text",
    "load_instance",
]
