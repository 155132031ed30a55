"""
Detection of Redactor-style ``<figure>`` blocks that CKEditor cannot read.

This is the read-only counterpart of :mod:`ckeditor_field.parsers.figure_migrator`:
it parses the fragment with BeautifulSoup and reports which figures would
still be rewritten.  The batch tool uses it to verify migrated content and
the ``map_figure_blocks`` script uses it to size a migration up front.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup, Tag


@dataclass
class LegacyFigure:
    kind: str  # "image" | "media"
    classes: List[str] = field(default_factory=list)
    src: Optional[str] = None


def _attr_str(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if isinstance(value, list):
        return " ".join(value)
    return value


def find_legacy_figures(html: str) -> List[LegacyFigure]:
    """
    List the figures in ``html`` that still use Redactor syntax.

    A figure is reported when:
    - it holds an ``<img>`` but has no ``image`` class
    - it holds an ``<iframe>`` but has no ``media`` class
    - it holds an ``<iframe>`` that was not converted to ``<oembed>`` or
      wrapped in a ``data-oembed-url`` container
    """
    if not html or "<figure" not in html.lower():
        return []

    soup = BeautifulSoup(html, "html.parser")
    found: List[LegacyFigure] = []
    for figure in soup.find_all("figure"):
        classes = list(figure.get("class") or [])
        img = figure.find("img")
        iframe = figure.find("iframe")

        if isinstance(img, Tag):
            if "image" not in classes:
                found.append(LegacyFigure("image", classes, _attr_str(img, "src")))
            continue
        if not isinstance(iframe, Tag):
            continue

        converted = figure.find(attrs={"data-oembed-url": True}) is not None
        if "media" not in classes or not converted:
            found.append(LegacyFigure("media", classes, _attr_str(iframe, "src")))
    return found


def needs_migration(html: str) -> bool:
    """Return ``True`` when ``html`` holds at least one legacy figure."""
    return bool(find_legacy_figures(html))
