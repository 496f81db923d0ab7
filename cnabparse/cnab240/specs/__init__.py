"""CNAB240 field tables, one module per record type.

Each module exposes ``FIELDS``: the record's fields in file order. Numeric
fields (``num``) are zero padded and right aligned, alphanumeric fields
(``alfa``) are blank padded and left aligned.
"""
