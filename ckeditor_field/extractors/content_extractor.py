import csv
import sys


def _raise_field_size_limit():
    # Rich-text columns easily exceed the csv module's 128 KiB default
    try:
        csv.field_size_limit(sys.maxsize)
    except (OverflowError, ValueError):
        csv.field_size_limit(10_000_000)


def extract_rows_from_csv(file_path, content_column="Content", id_column="ID"):
    """Extract field content rows from a CMS content export.

    Each row is normalized to ``ID``, ``Title`` and ``ContentHTML`` keys;
    the untouched CSV row is kept under ``Row`` so it can be written back.
    An empty content cell becomes an empty string.

    Args:
        file_path (str): Path of the CSV file.
        content_column (str): Column holding the rich-text HTML.
        id_column (str): Column identifying the row.

    Returns:
        list: One dictionary per row, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content column is missing or a row cannot be
            processed.
    """
    _raise_field_size_limit()
    rows = []
    # utf-8-sig strips the BOM some exporters write
    with open(file_path, mode='r', encoding='utf-8-sig', newline='') as csvfile:
        reader = csv.DictReader(csvfile)
        if not reader.fieldnames or content_column not in reader.fieldnames:
            raise ValueError(
                f"Column '{content_column}' not found in {file_path}. Available: {reader.fieldnames}"
            )

        title_column = next(
            (col for col in reader.fieldnames if col.lower() in ('title', 'name', 'handle')),
            None,
        )

        for row_num, row in enumerate(reader, start=2):  # header is row 1
            try:
                if None in row:
                    raise ValueError(f"{len(row[None])} value(s) beyond the header columns")
                rows.append({
                    'ID': row.get(id_column),
                    'Title': row.get(title_column) if title_column else None,
                    'ContentHTML': row.get(content_column) or '',
                    'Row': dict(row),
                })
            except Exception as e:
                raise ValueError(f"Error processing row {row_num} in {file_path}: {e}") from e
    return rows
