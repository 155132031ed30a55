"""
Entry point for the batch Redactor → CKEditor content migration.
"""

import glob
import os
from ckeditor_field.migration_tool import ContentMigrationTool

CONFIG_FILE = "config/migration_config.json"


def main():
    """
    Migrate every CSV content export found in the 'exports' directory.
    """
    tool = ContentMigrationTool(config_file=CONFIG_FILE)
    tool.log_message("Starting Redactor to CKEditor content migration.")

    exports_path = "exports/"
    csv_files = sorted(glob.glob(os.path.join(exports_path, "*.csv")))
    tool.log_message(f"Discovered CSV files: {csv_files}", level="DEBUG")

    if not csv_files:
        tool.log_message(
            f"No content export files (.csv) found in '{exports_path}' directory.",
            level="ERROR",
        )
        return

    totals = {"total": 0, "changed": 0, "unchanged": 0, "failed": 0}
    for csv_path in csv_files:
        summary = tool.migrate_file(csv_path)
        for key in totals:
            totals[key] += summary[key]

    tool.log_message(
        f"Migration process finished: {totals['total']} rows, {totals['changed']} changed, "
        f"{totals['failed']} need attention."
    )


if __name__ == "__main__":
    main()
