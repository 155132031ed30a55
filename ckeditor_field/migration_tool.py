"""
Batch migration of stored rich-text content.

This module defines a :class:`ContentMigrationTool` class that runs exported
field values through the same persistence path the field uses on save
(:meth:`ckeditor_field.field.RichTextField.serialize_value`), verifies the
result with the figure inspector, writes the migrated CSV and records a
report entry per row.

Configuration is supplied via a JSON file path or directly as a
dictionary.  The ``field`` section holds field settings, the ``editor``
section the editor config that decides the media syntax, and the
``migration`` section run options (dry-run, limit, output directory).
"""

from __future__ import annotations

import csv
import json
import os
from typing import Any, Dict, List, Optional

from ckeditor_field.extractors import extract_rows_from_csv
from ckeditor_field.field import RichTextField
from ckeditor_field.models import EditorConfig
from ckeditor_field.parsers import needs_migration
from ckeditor_field.utils.errors import report_error, report_ok

_TRUTHY = ("1", "true", "yes", "on")


class _SingleConfigStore:
    """Editor config store holding the one config a run is configured with."""

    def __init__(self, config: EditorConfig) -> None:
        self.config = config

    def get_by_uid(self, uid: str) -> EditorConfig:
        if uid != self.config.uid:
            raise KeyError(uid)
        return self.config


class ContentMigrationTool:
    """
    Holds the configuration and the field adapter for one migration run.
    Each processed row is reported through :mod:`ckeditor_field.utils.errors`.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, *, config_file: Optional[str] = None) -> None:
        if config_file and os.path.exists(config_file):
            with open(config_file, "r", encoding="utf-8") as f:
                config = json.load(f)
        elif config is None:
            config = {}

        # Ensure essential keys exist to prevent KeyErrors
        config.setdefault("editor", {})
        config["editor"].setdefault("uid", "migration")
        config["editor"].setdefault(
            "media_previews", os.getenv("CKE_MEDIA_PREVIEWS", "").strip().lower() in _TRUTHY
        )
        config["editor"].setdefault("options", {})

        config.setdefault("field", {})
        config["field"].setdefault("ckeConfig", config["editor"]["uid"])

        config.setdefault("migration", {})
        config["migration"].setdefault("dry_run", False)
        config["migration"].setdefault("limit", None)
        config["migration"].setdefault("output_dir", os.path.join("reports", "migrated"))
        config["migration"].setdefault("content_column", "Content")
        config["migration"].setdefault("id_column", "ID")

        self.config = config
        self.field = RichTextField(config["field"], config_store=_SingleConfigStore(self._editor_config()))

    def _editor_config(self) -> EditorConfig:
        editor = self.config["editor"]
        options = dict(editor.get("options") or {})
        media_embed = dict(options.get("mediaEmbed") or {})
        media_embed.setdefault("previewsInData", bool(editor["media_previews"]))
        options["mediaEmbed"] = media_embed
        return EditorConfig(uid=editor["uid"], name=editor.get("name", "Migration"), options=options)

    def log_message(self, message: str, level: str = "INFO") -> None:
        print(f"[{level}] {message}")
        os.makedirs(os.path.join("reports", "migration"), exist_ok=True)
        with open(os.path.join("reports", "migration", "migration.log"), "a", encoding="utf-8") as f:
            f.write(f"{level}: {message}\n")

    def extract_rows(self, csv_path: str) -> List[Dict[str, Any]]:
        migration = self.config["migration"]
        if not os.path.exists(csv_path):
            self.log_message(f"Export file not found: {csv_path}", "ERROR")
            return []
        self.log_message(f"Extracting rows from CSV {csv_path}")
        try:
            return extract_rows_from_csv(
                csv_path,
                content_column=migration["content_column"],
                id_column=migration["id_column"],
            )
        except ValueError as e:
            self.log_message(f"Error extracting CSV: {e}", "ERROR")
            return []

    def migrate_rows(self, rows: List[Dict[str, Any]], *, source_name: str) -> Dict[str, Any]:
        """
        Migrate the content of ``rows`` and write the result.

        :param rows: Rows as returned by :meth:`extract_rows`.
        :param source_name: File name used for the migrated CSV.
        :return: Summary counts plus the output path (``None`` on dry-run).
        """
        migration = self.config["migration"]
        dry_run: bool = bool(migration["dry_run"])
        limit: Optional[int] = migration["limit"]
        content_column: str = migration["content_column"]

        summary: Dict[str, Any] = {"total": 0, "changed": 0, "unchanged": 0, "failed": 0, "output": None}
        migrated_rows: List[Dict[str, Any]] = []
        self.log_message(
            f"Migrating {len(rows)} rows from '{source_name}' "
            f"(media previews: {self.field.media_previews_enabled})"
        )

        for row in rows:
            if limit is not None and summary["total"] >= limit:
                break
            summary["total"] += 1
            html = row.get("ContentHTML") or ""
            out_row = dict(row.get("Row") or {})

            if not html.strip():
                report_ok("MISSING_CONTENT", row)
                summary["unchanged"] += 1
                migrated_rows.append(out_row)
                continue

            try:
                migrated = self.field.serialize_value(html)
            except Exception as e:
                report_error("ROW_FAILED", row, e)
                self.log_message(f"Failed to migrate row '{row.get('ID')}': {e}", "ERROR")
                summary["failed"] += 1
                migrated_rows.append(out_row)
                continue

            out_row[content_column] = migrated
            migrated_rows.append(out_row)

            if needs_migration(migrated):
                report_error("LEGACY_MARKUP_REMAINS", row)
                self.log_message(f"Row '{row.get('ID')}' still holds legacy figure markup", "WARNING")
                summary["failed"] += 1
            elif migrated != html:
                report_ok("FIGURES_MIGRATED", row, {"dry_run": dry_run})
                summary["changed"] += 1
            else:
                report_ok("UNCHANGED", row)
                summary["unchanged"] += 1

        if dry_run:
            self.log_message(f"Dry-run: would write {len(migrated_rows)} rows for '{source_name}'")
        elif migrated_rows:
            summary["output"] = self._write_rows(migrated_rows, source_name)
            self.log_message(f"Migrated CSV written to {summary['output']}")

        self.log_message(
            f"Finished '{source_name}': {summary['changed']} changed, "
            f"{summary['unchanged']} unchanged, {summary['failed']} failed"
        )
        return summary

    def _write_rows(self, rows: List[Dict[str, Any]], source_name: str) -> str:
        out_dir = self.config["migration"]["output_dir"]
        os.makedirs(out_dir, exist_ok=True)
        out_path = os.path.join(out_dir, os.path.basename(source_name))
        fieldnames: List[str] = []
        for row in rows:
            for key in row:
                if key not in fieldnames:
                    fieldnames.append(key)
        with open(out_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(rows)
        return out_path

    def migrate_file(self, csv_path: str) -> Dict[str, Any]:
        rows = self.extract_rows(csv_path)
        return self.migrate_rows(rows, source_name=os.path.basename(csv_path))
