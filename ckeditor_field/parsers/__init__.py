"""
HTML transformations applied to field values.

This subpackage exposes ``migrate`` (Redactor → CKEditor figure syntax),
``normalize_for_editor`` (editor input clean-up) and the BeautifulSoup based
``find_legacy_figures`` inspector.
"""

from .figure_migrator import migrate, normalize_embed_url
from .input_normalizer import normalize_for_editor
from .figure_inspector import LegacyFigure, find_legacy_figures, needs_migration

__all__ = [
    "migrate",
    "normalize_embed_url",
    "normalize_for_editor",
    "LegacyFigure",
    "find_legacy_figures",
    "needs_migration",
]
