"""Export decoded records as JSON."""
from __future__ import annotations

import json

from cnabparse.cnab240.reader import DecodedRecord


def export_json(records: list[DecodedRecord]) -> str:
    """Export records as JSON string."""
    data = []
    for rec in records:
        data.append({
            "line": rec.line_no,
            "kind": rec.kind,
            "fields": rec.fields,
        })
    return json.dumps(data, indent=2, ensure_ascii=False)
