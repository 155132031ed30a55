"""
Extractors for CMS content exports.

This subpackage reads CSV exports of rich-text field values into normalized
row dictionaries (``ID``, ``Title``, ``ContentHTML``) for the batch
migration tool.
"""

from .content_extractor import extract_rows_from_csv

__all__ = ["extract_rows_from_csv"]
