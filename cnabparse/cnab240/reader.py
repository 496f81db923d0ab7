"""Split CNAB240 files into records and decode them."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from cnabparse.cnab240.constants import EOF_MARKER, RECORD_LENGTH
from cnabparse.cnab240.parsers import classify, get_parser
from cnabparse.errors import RecordLengthMismatch
from cnabparse.parser import DEFAULT_ENCODING, FixedLengthParser, strip_padding

logger = logging.getLogger(__name__)


@dataclass
class DecodedRecord:
    """One decoded record of a file."""
    line_no: int        # 1-based record number in the file
    kind: str           # record kind, e.g. 'segmento_d'
    fields: dict[str, str] = field(default_factory=dict)


def iter_records(data: bytes) -> Iterator[tuple[int, bytes]]:
    """Yield (line_no, record) for every record in a CNAB240 file.

    Records are usually one per line (CRLF or LF), but some systems write
    them back to back with no separator. Empty lines and a trailing EOF
    marker are skipped; a 240-byte record of blanks is still a record.
    """
    data = data.rstrip(EOF_MARKER)

    if b"\n" in data or b"\r" in data:
        for line_no, line in enumerate(data.splitlines(), start=1):
            if not line:
                continue
            if len(line) != RECORD_LENGTH:
                raise RecordLengthMismatch(RECORD_LENGTH, len(line), line_no)
            yield line_no, line
        return

    for i in range(0, len(data), RECORD_LENGTH):
        chunk = data[i:i + RECORD_LENGTH]
        line_no = i // RECORD_LENGTH + 1
        if len(chunk) != RECORD_LENGTH:
            raise RecordLengthMismatch(RECORD_LENGTH, len(chunk), line_no)
        yield line_no, chunk


def decode_records(
    data: bytes,
    encoding: str = DEFAULT_ENCODING,
    strip: bool = False,
    kind: Optional[str] = None,
) -> list[DecodedRecord]:
    """Decode all records in ``data``.

    Each record's layout is chosen from its type codes unless ``kind``
    forces a single layout for the whole file.
    """
    result = []
    by_kind: dict[str, FixedLengthParser] = {}
    for line_no, record in iter_records(data):
        record_kind = kind or classify(record, line_no)
        parser = by_kind.get(record_kind)
        if parser is None:
            parser = get_parser(record_kind)
            if encoding != parser.encoding:
                parser = parser.with_encoding(encoding)
            by_kind[record_kind] = parser

        values = parser.parse(record)
        if strip:
            values = strip_padding(parser, values)
        result.append(DecodedRecord(line_no=line_no, kind=record_kind, fields=values))

    logger.debug("Decoded %d records", len(result))
    return result


def read_file(
    path: Path,
    encoding: str = DEFAULT_ENCODING,
    strip: bool = False,
    kind: Optional[str] = None,
) -> list[DecodedRecord]:
    """Read and decode a CNAB240 file."""
    data = Path(path).read_bytes()
    logger.info("Reading %s (%d bytes)", path, len(data))
    return decode_records(data, encoding=encoding, strip=strip, kind=kind)
