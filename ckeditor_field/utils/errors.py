"""
Structured logging helpers for content migration events.

Every row the batch tool processes produces one JSON Lines entry under
``reports/migration``: failures go to ``errors.jsonl`` and everything else to
``success.jsonl``, so a run can be reviewed or parsed afterwards.

``report_error``
    Record a problem with a row.  An optional exception is serialized into
    the entry.

``report_ok``
    Record a processed row.  Extra key/value information can be attached via
    ``extra``.

``ERRORS`` maps event codes to human readable messages.  Unknown codes fall
back to the code itself.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

ERRORS: Dict[str, str] = {
    "ROW_FAILED": "Failed to migrate field content",
    "LEGACY_MARKUP_REMAINS": "Legacy figure markup remains after migration",
    "MISSING_CONTENT": "Row has no field content",
    "FIGURES_MIGRATED": "Figure markup migrated to CKEditor syntax",
    "UNCHANGED": "Content already in CKEditor syntax",
}

_REPORT_DIR = os.path.join("reports", "migration")
_ERROR_LOG = os.path.join(_REPORT_DIR, "errors.jsonl")
_OK_LOG = os.path.join(_REPORT_DIR, "success.jsonl")


def _write_jsonl(path: str, data: Dict[str, Any]) -> None:
    """Append ``data`` as a JSON object followed by a newline to ``path``."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)
        f.write("\n")


def _entry(code: str, row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "code": code,
        "message": ERRORS.get(code, code),
        "id": row.get("ID"),
        "title": row.get("Title"),
    }


def report_error(code: str, row: Dict[str, Any], exc: Optional[Exception] = None) -> None:
    """Log an error event for ``row``.

    Parameters
    ----------
    code:
        A key identifying the type of error, looked up in :data:`ERRORS`.
    row:
        The content row the error belongs to.  Only ``ID`` and ``Title``
        are copied into the entry.
    exc:
        Optional exception that triggered the error.
    """
    entry = _entry(code, row)
    if exc is not None:
        entry["error"] = str(exc)
    print(f"[ERROR] {entry['message']} - {row.get('ID', '')}")
    _write_jsonl(_ERROR_LOG, entry)


def report_ok(code: str, row: Dict[str, Any], extra: Optional[Dict[str, Any]] = None) -> None:
    """Log a successful event for ``row``, merging ``extra`` into the entry."""
    entry = _entry(code, row)
    if extra:
        entry.update(extra)
    print(f"[OK] {entry['message']} - {row.get('ID', '')}")
    _write_jsonl(_OK_LOG, entry)
