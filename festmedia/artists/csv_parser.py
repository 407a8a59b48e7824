"""
CSV parsing for the lineup spreadsheet export.
"""

import csv
import io


def parse_csv(text: str) -> list[dict[str, str]]:
    """
    Parse CSV text into row dicts keyed by lower-cased header.

    Handles quoted fields, "" escapes and newlines inside quotes. Cells are
    trimmed, blank lines skipped, and short rows padded with "".
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    reader = csv.reader(io.StringIO(text, newline=""))
    rows = [row for row in reader if row]
    if not rows:
        return []

    header = [h.strip().lower() for h in rows[0]]
    out = []
    for values in rows[1:]:
        values = [v.strip() for v in values]
        out.append({
            name: (values[i] if i < len(values) else "")
            for i, name in enumerate(header)
        })
    return out
