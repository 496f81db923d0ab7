"""Export decoded records as CSV, one row per field."""
from __future__ import annotations

import csv
import io

from cnabparse.cnab240.reader import DecodedRecord


def export_csv(records: list[DecodedRecord]) -> str:
    """Export records as CSV string."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")

    writer.writerow(["line", "kind", "field", "value"])
    for rec in records:
        for name, value in rec.fields.items():
            writer.writerow([rec.line_no, rec.kind, name, value])

    return output.getvalue()
