"""CNAB240 record constants."""

RECORD_LENGTH = 240

# Offsets (zero-based) of the codes that identify a record
TIPO_REGISTRO_OFFSET = 7    # position 8
SEGMENTO_OFFSET = 13        # position 14, detail records only

# Tipo de registro (G003)
REG_HEADER_ARQUIVO = "0"
REG_HEADER_LOTE = "1"
REG_DETALHE = "3"
REG_TRAILER_LOTE = "5"
REG_TRAILER_ARQUIVO = "9"

# Record kinds, as used by the CLI and in decoded output
HEADER_ARQUIVO = "header_arquivo"
HEADER_LOTE = "header_lote"
SEGMENTO_D = "segmento_d"
TRAILER_LOTE = "trailer_lote"
TRAILER_ARQUIVO = "trailer_arquivo"

# End-of-file marker some bank systems still append
EOF_MARKER = b"\x1a"
