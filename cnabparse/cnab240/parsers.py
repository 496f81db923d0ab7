"""Ready-made CNAB240 parsers, one per record type."""
from __future__ import annotations

from functools import lru_cache
from typing import Callable, Optional

from cnabparse.cnab240.constants import (
    HEADER_ARQUIVO,
    HEADER_LOTE,
    RECORD_LENGTH,
    REG_DETALHE,
    REG_HEADER_ARQUIVO,
    REG_HEADER_LOTE,
    REG_TRAILER_ARQUIVO,
    REG_TRAILER_LOTE,
    SEGMENTO_D,
    SEGMENTO_OFFSET,
    TIPO_REGISTRO_OFFSET,
    TRAILER_ARQUIVO,
    TRAILER_LOTE,
)
from cnabparse.cnab240.specs import header_arquivo as _header_arquivo
from cnabparse.cnab240.specs import header_lote as _header_lote
from cnabparse.cnab240.specs import segmento_d as _segmento_d
from cnabparse.cnab240.specs import trailer_arquivo as _trailer_arquivo
from cnabparse.cnab240.specs import trailer_lote as _trailer_lote
from cnabparse.errors import RecordLengthMismatch, UnknownRecordType
from cnabparse.parser import FixedLengthParser, build_parser


@lru_cache(maxsize=None)
def header_arquivo() -> FixedLengthParser:
    return build_parser(RECORD_LENGTH, _header_arquivo.FIELDS)


@lru_cache(maxsize=None)
def trailer_arquivo() -> FixedLengthParser:
    return build_parser(RECORD_LENGTH, _trailer_arquivo.FIELDS)


@lru_cache(maxsize=None)
def header_lote() -> FixedLengthParser:
    return build_parser(RECORD_LENGTH, _header_lote.FIELDS)


@lru_cache(maxsize=None)
def trailer_lote() -> FixedLengthParser:
    return build_parser(RECORD_LENGTH, _trailer_lote.FIELDS)


@lru_cache(maxsize=None)
def segmento_d() -> FixedLengthParser:
    return build_parser(RECORD_LENGTH, _segmento_d.FIELDS)


RECORD_PARSERS: dict[str, Callable[[], FixedLengthParser]] = {
    HEADER_ARQUIVO: header_arquivo,
    HEADER_LOTE: header_lote,
    SEGMENTO_D: segmento_d,
    TRAILER_LOTE: trailer_lote,
    TRAILER_ARQUIVO: trailer_arquivo,
}

# tipo_registro -> kind, for records that carry no segment code
_KIND_BY_TYPE = {
    REG_HEADER_ARQUIVO: HEADER_ARQUIVO,
    REG_HEADER_LOTE: HEADER_LOTE,
    REG_TRAILER_LOTE: TRAILER_LOTE,
    REG_TRAILER_ARQUIVO: TRAILER_ARQUIVO,
}

# segment code -> kind, for detail records
_KIND_BY_SEGMENT = {
    "D": SEGMENTO_D,
}


def get_parser(kind: str) -> FixedLengthParser:
    """Look up a parser by record kind name (e.g. 'segmento_d')."""
    try:
        factory = RECORD_PARSERS[kind]
    except KeyError:
        raise UnknownRecordType(kind) from None
    return factory()


def classify(record: bytes, line: Optional[int] = None) -> str:
    """Return the record kind from its tipo_registro and segment codes."""
    if len(record) != RECORD_LENGTH:
        raise RecordLengthMismatch(RECORD_LENGTH, len(record), line)

    tipo = chr(record[TIPO_REGISTRO_OFFSET])
    if tipo == REG_DETALHE:
        segment = chr(record[SEGMENTO_OFFSET])
        kind = _KIND_BY_SEGMENT.get(segment.upper())
        if kind is None:
            raise UnknownRecordType(tipo, segment, line)
        return kind

    kind = _KIND_BY_TYPE.get(tipo)
    if kind is None:
        raise UnknownRecordType(tipo, line=line)
    return kind


def parser_for(record: bytes, line: Optional[int] = None) -> FixedLengthParser:
    """Pick the parser matching a record's type codes."""
    return get_parser(classify(record, line))
