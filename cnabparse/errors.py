"""Errors raised while building layouts and decoding records."""
from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Base class for every layout or record error."""


class FieldOutOfBound(ParseError):
    """A field would end past the record's fixed length."""

    def __init__(self, field: str, position: tuple[int, int], max: int):
        self.field = field
        self.position = position
        self.max = max
        super().__init__(f"Field {field} out of bound: ({position[0]}, {position[1]})/{max}")


class InvalidLength(ParseError):
    """More fields were declared than the record length can hold."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid length parser, expected {expected}, got {actual}")


class InvalidFieldSpec(ParseError):
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid field {field!r}: {reason}")


class RecordLengthMismatch(ParseError):
    """A buffer handed to a parser is not exactly the record length."""

    def __init__(self, expected: int, actual: int, line: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        self.line = line
        where = f"Line {line}: " if line is not None else ""
        super().__init__(f"{where}record has {actual} bytes, expected {expected}")


class FieldValueTooLong(ParseError):
    def __init__(self, field: str, length: int, value: str, size: int):
        self.field = field
        self.length = length
        self.value = value
        self.size = size
        super().__init__(f"Value for field {field} takes {size} bytes, field holds {length}")


class InvalidEncoding(ParseError):
    """The codec is unknown or does not turn bytes into text."""

    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f"unknown text encoding '{encoding}'")


class UnknownRecordType(ParseError):
    """No layout is registered for a record's type/segment codes."""

    def __init__(self, record_type: str, segment: Optional[str] = None, line: Optional[int] = None):
        self.record_type = record_type
        self.segment = segment
        self.line = line
        where = f"Line {line}: " if line is not None else ""
        what = f"record type {record_type!r}"
        if segment is not None:
            what += f" segment {segment!r}"
        super().__init__(f"{where}no layout for {what}")
