"""Decoder for CNAB240 fixed-width bank records."""
from cnabparse.errors import (
    FieldOutOfBound,
    FieldValueTooLong,
    InvalidEncoding,
    InvalidFieldSpec,
    InvalidLength,
    ParseError,
    RecordLengthMismatch,
    UnknownRecordType,
)
from cnabparse.layout import Alignment, Field, FieldSpec, alfa, num
from cnabparse.parser import FixedLengthParser, FixedLengthParserBuilder, build_parser, strip_padding

__all__ = [
    "Alignment",
    "Field",
    "FieldOutOfBound",
    "FieldSpec",
    "FieldValueTooLong",
    "FixedLengthParser",
    "FixedLengthParserBuilder",
    "InvalidEncoding",
    "InvalidFieldSpec",
    "InvalidLength",
    "ParseError",
    "RecordLengthMismatch",
    "UnknownRecordType",
    "alfa",
    "build_parser",
    "num",
    "strip_padding",
]
