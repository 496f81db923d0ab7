"""Fixed-length record parser and its builder.

A layout is declared as an ordered list of fields. The builder packs them
contiguously from offset 0, refusing any field that would end past the
record length. The finished parser slices a record into its fields and
returns a ``{name: text}`` dict, padding included.
"""
from __future__ import annotations

import logging
from typing import Iterable, Mapping

from cnabparse.errors import (
    FieldOutOfBound,
    FieldValueTooLong,
    InvalidEncoding,
    InvalidLength,
    RecordLengthMismatch,
)
from cnabparse.layout import Alignment, Field, FieldSpec

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def check_encoding(encoding: str) -> None:
    """Raise InvalidEncoding unless ``encoding`` is a text codec.

    codecs.lookup alone accepts bytes-to-bytes codecs such as base64,
    which bytes.decode refuses.
    """
    try:
        b"".decode(encoding)
    except LookupError:
        raise InvalidEncoding(encoding) from None


class FixedLengthParser:
    """Decoder for records of exactly ``length`` bytes.

    Instances are immutable once built and can be shared freely.
    """

    __slots__ = ("_length", "_fields", "_encoding")

    def __init__(self, length: int, fields: Iterable[Field], encoding: str = DEFAULT_ENCODING):
        check_encoding(encoding)
        self._length = length
        self._fields = tuple(fields)
        self._encoding = encoding

    @property
    def length(self) -> int:
        return self._length

    @property
    def fields(self) -> tuple[Field, ...]:
        return self._fields

    @property
    def encoding(self) -> str:
        return self._encoding

    def with_encoding(self, encoding: str) -> FixedLengthParser:
        """Same layout, decoding field bytes with another codec."""
        return FixedLengthParser(self._length, self._fields, encoding)

    def field(self, name: str) -> Field:
        """Get the last field declared under ``name``."""
        for f in reversed(self._fields):
            if f.name == name:
                return f
        raise KeyError(name)

    def _check_length(self, record: bytes) -> None:
        if len(record) != self._length:
            raise RecordLengthMismatch(self._length, len(record))

    def parse(self, record: bytes) -> dict[str, str]:
        """Decode every field of ``record``.

        Invalid byte sequences become U+FFFD instead of raising, so any
        record of the right length decodes. A later field with the same
        name as an earlier one overwrites its value.
        """
        self._check_length(record)
        data = bytes(record)
        result: dict[str, str] = {}
        for f in self._fields:
            result[f.name] = data[f.start:f.end].decode(self._encoding, errors="replace")
        return result

    def format(self, values: Mapping[str, str]) -> bytes:
        """Build a record from field values, padding each per its alignment.

        Missing fields are written as pure padding. Bytes past the last
        field, if the layout does not fill the record, are blanks.
        """
        chunks = []
        for f in self._fields:
            value = str(values.get(f.name, ""))
            raw = f.justify(value, self._encoding)
            if raw is None:
                raise FieldValueTooLong(f.name, f.length, value, len(value.encode(self._encoding)))
            chunks.append(raw)
        record = b"".join(chunks)
        return record.ljust(self._length, b" ")

    def __repr__(self) -> str:
        return f"<FixedLengthParser length={self._length} fields={len(self._fields)}>"


class FixedLengthParserBuilder:
    """Append-only builder: each field is placed right after the previous one."""

    def __init__(self, length: int, encoding: str = DEFAULT_ENCODING):
        check_encoding(encoding)
        self.length = length
        self.encoding = encoding
        self.offset = 0
        self._fields: list[Field] = []
        self._names: set[str] = set()

    def add_field(self, name: str, length: int, pad_char: str, alignment: Alignment) -> FixedLengthParserBuilder:
        spec = FieldSpec(name, length, pad_char, alignment)
        return self.add(spec)

    def add(self, spec: FieldSpec) -> FixedLengthParserBuilder:
        """Place ``spec`` at the current offset. Raises FieldOutOfBound without side effects."""
        if self.offset + spec.length > self.length:
            raise FieldOutOfBound(spec.name, (self.offset, spec.length), self.length)

        if spec.name in self._names:
            logger.warning("Duplicate field %r at offset %d; it overrides the earlier one", spec.name, self.offset)
        self._names.add(spec.name)

        self._fields.append(Field(
            name=spec.name,
            start=self.offset,
            length=spec.length,
            pad_char=spec.pad_char,
            alignment=spec.alignment,
        ))
        self.offset += spec.length
        return self

    def build(self) -> FixedLengthParser:
        if len(self._fields) > self.length:
            raise InvalidLength(self.length, len(self._fields))
        if self.offset < self.length:
            logger.debug("Layout covers %d of %d bytes", self.offset, self.length)
        return FixedLengthParser(self.length, self._fields, self.encoding)


def build_parser(length: int, specs: Iterable[FieldSpec], encoding: str = DEFAULT_ENCODING) -> FixedLengthParser:
    """Build a parser from a layout table."""
    builder = FixedLengthParserBuilder(length, encoding)
    for spec in specs:
        builder.add(spec)
    return builder.build()


def strip_padding(parser: FixedLengthParser, decoded: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``decoded`` with each field's padding removed."""
    result: dict[str, str] = {}
    for name, value in decoded.items():
        try:
            f = parser.field(name)
        except KeyError:
            result[name] = value
            continue
        result[name] = f.strip(value)
    return result
