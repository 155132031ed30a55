#!/usr/bin/env python3
"""
Map the legacy Redactor figure blocks present in the content column of a
CSV export and write a (kind, count) summary to the "data/" folder.
When legacy blocks are found, a detailed file listing them per row is
written next to it.

Usage:
  python scripts/map_figure_blocks.py \\
    --input exports/entries.csv \\
    --column Content \\
    --output data/legacy_figures_counts.csv

Defaults above are used when arguments are omitted.
"""

from __future__ import annotations

import argparse
import csv
import sys
from collections import Counter
from pathlib import Path
from typing import List, Tuple

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ckeditor_field.extractors import extract_rows_from_csv
from ckeditor_field.parsers import find_legacy_figures


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Count legacy Redactor figure blocks in a CSV content export."
    )
    parser.add_argument(
        "--input",
        default="exports/entries.csv",
        help="Path of the input CSV file",
    )
    parser.add_argument(
        "--column",
        default="Content",
        help="Column holding the HTML (default: Content)",
    )
    parser.add_argument(
        "--output",
        default="data/legacy_figures_counts.csv",
        help="Path of the output CSV with (kind,count)",
    )
    return parser.parse_args(argv)


def count_legacy_figures(csv_path: Path, content_column: str) -> Tuple[Counter, List[Tuple[str, str, str]]]:
    """Count legacy figures by kind and collect (id, kind, src) details."""
    counter: Counter[str] = Counter()
    details: List[Tuple[str, str, str]] = []

    for row in extract_rows_from_csv(str(csv_path), content_column=content_column):
        for figure in find_legacy_figures(row["ContentHTML"]):
            counter[figure.kind] += 1
            details.append((row.get("ID") or "", figure.kind, figure.src or ""))
    return counter, details


def write_counts_csv(counter: Counter, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["kind", "count"])
        for kind, count in sorted(counter.items(), key=lambda x: (-x[1], x[0])):
            writer.writerow([kind, count])


def write_details_csv(details: List[Tuple[str, str, str]], out_path: Path) -> Path:
    details_path = out_path.with_name(out_path.stem + "_details.csv")
    details_path.parent.mkdir(parents=True, exist_ok=True)
    with details_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "kind", "src"])
        writer.writerows(details)
    print(f"Legacy figure details saved to: {details_path}")
    return details_path


def main(argv=None) -> None:
    args = parse_args(argv)
    in_path = Path(args.input)
    out_path = Path(args.output)

    if not in_path.exists():
        raise SystemExit(f"Input file not found: {in_path}")

    try:
        counts, details = count_legacy_figures(in_path, args.column)
    except ValueError as e:
        raise SystemExit(str(e))
    write_counts_csv(counts, out_path)
    if details:
        write_details_csv(details, out_path)

    print(f"Legacy image figures: {counts.get('image', 0)}")
    print(f"Legacy media figures: {counts.get('media', 0)}")
    print(f"File written: {out_path}")


if __name__ == "__main__":
    main()
