"""FEBRABAN CNAB240 layouts built on the generic fixed-length parser."""
