"""Field declarations and resolved fields for fixed-width records."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cnabparse.errors import InvalidFieldSpec


class Alignment(Enum):
    """How a value is justified inside its field when written."""
    LEFT = "left"      # text, blank padded on the right
    RIGHT = "right"    # numeric, zero padded on the left


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """A field declaration as written in a layout table (no offset)."""
    name: str
    length: int
    pad_char: str
    alignment: Alignment

    def __post_init__(self):
        if not self.name:
            raise InvalidFieldSpec(self.name, "name must not be empty")
        if not isinstance(self.length, int) or isinstance(self.length, bool):
            raise InvalidFieldSpec(self.name, f"length must be an int, got {self.length!r}")
        if self.length < 0:
            raise InvalidFieldSpec(self.name, f"negative length {self.length}")
        if len(self.pad_char) != 1:
            raise InvalidFieldSpec(self.name, f"pad_char must be one character, got {self.pad_char!r}")


@dataclass(frozen=True, slots=True)
class Field:
    """A field placed at a fixed offset inside a record."""
    name: str
    start: int         # zero-based byte offset
    length: int
    pad_char: str
    alignment: Alignment

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def position(self) -> tuple[int, int]:
        """1-based inclusive (first, last) byte positions, as bank manuals list them."""
        return self.start + 1, self.end

    def justify(self, value: str, encoding: str = "utf-8") -> Optional[bytes]:
        """Encode ``value`` and pad it to exactly ``length`` bytes.

        Returns None if the encoded value, or its padding, cannot fill
        the field exactly.
        """
        raw = value.encode(encoding)
        pad = self.pad_char.encode(encoding)
        missing = self.length - len(raw)
        if missing < 0 or missing % len(pad):
            return None
        padding = pad * (missing // len(pad))
        if self.alignment is Alignment.RIGHT:
            return padding + raw
        return raw + padding

    def strip(self, value: str) -> str:
        """Remove the padding added by justify()."""
        if self.alignment is Alignment.RIGHT:
            stripped = value.lstrip(self.pad_char)
            # keep a lone pad char so an all-zero numeric stays "0"
            if not stripped and value:
                return self.pad_char
            return stripped
        return value.rstrip(self.pad_char)


def num(name: str, length: int) -> FieldSpec:
    """Numeric field: right aligned, zero padded."""
    return FieldSpec(name, length, "0", Alignment.RIGHT)


def alfa(name: str, length: int) -> FieldSpec:
    """Alphanumeric field: left aligned, blank padded."""
    return FieldSpec(name, length, " ", Alignment.LEFT)
