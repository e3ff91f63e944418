"""CSV and JSON export rendering for generated batches."""
import json

from .crypto import encode_public, encode_secret
from .models import Batch
from .types import ExportFormat, ExportRow, KeySelection


def export_rows(batch: Batch, selection: KeySelection = KeySelection.BOTH) -> list[ExportRow]:
    """Encode a batch into export rows in batch order."""
    rows: list[ExportRow] = []
    for pair in batch.key_pairs:
        row: ExportRow = {}
        if selection != KeySelection.PUBLIC_ONLY:
            row["privateKey"] = encode_secret(pair.secret_key)
        if selection != KeySelection.PRIVATE_ONLY and batch.include_public_key:
            row["publicKey"] = encode_public(pair.public_key)
        if row:
            rows.append(row)
    return rows


def _render_csv(rows: list[ExportRow]) -> str:
    return "\n".join(", ".join(row.values()) for row in rows)


def render_export(batch: Batch, fmt: ExportFormat, selection: KeySelection = KeySelection.BOTH) -> str:
    """Render a batch as a CSV or JSON export payload.

    Public keys appear only when the batch was generated with
    ``include_public_key``. CSV output has no header and no trailing
    newline; JSON output is a 2-space indented array in batch order.
    """
    fmt = ExportFormat(fmt)
    rows = export_rows(batch, KeySelection(selection))
    if fmt == ExportFormat.JSON:
        return json.dumps(rows, indent=2)
    return _render_csv(rows)


def parse_export(text: str, fmt: ExportFormat) -> list[ExportRow]:
    """Read an export payload back into rows.

    CSV lines with two fields are read as ``privateKey, publicKey``; single
    field lines as ``privateKey``. Raises ValueError on malformed input.
    """
    fmt = ExportFormat(fmt)
    if fmt == ExportFormat.JSON:
        data = json.loads(text)
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise ValueError("JSON export must be an array of objects")
        return [ExportRow(**item) for item in data]
    rows: list[ExportRow] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        fields = [f.strip() for f in line.split(",")]
        if len(fields) == 1:
            rows.append({"privateKey": fields[0]})
        elif len(fields) == 2:
            rows.append({"privateKey": fields[0], "publicKey": fields[1]})
        else:
            raise ValueError(f"Unexpected CSV line with {len(fields)} fields")
    return rows
