"""
Utility helpers used by the migration tool.

This subpackage exposes the structured JSON Lines reporting helpers.
"""

from .errors import ERRORS, report_error, report_ok

__all__ = ["ERRORS", "report_error", "report_ok"]
