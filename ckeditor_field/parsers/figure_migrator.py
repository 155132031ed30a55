"""
Redactor → CKEditor translation of ``<figure>`` markup.

Redactor stores images as ``<figure><img ...></figure>`` and videos as
``<figure><iframe ...></iframe></figure>``.  CKEditor only recognises them
when the figure carries a ``image`` or ``media`` class, and it expects
videos either as

* ``<figure class="media"><div data-oembed-url="URL"><iframe ...`` when the
  ``mediaEmbed.previewsInData`` option is on, or
* ``<figure class="media"><oembed url="URL"></oembed>`` otherwise.

:func:`migrate` walks the fragment once with a forward-only cursor and
rewrites only the figure blocks it finds.  Anything outside those blocks is
copied through unchanged, and running it on its own output is a no-op.
"""

from __future__ import annotations

import re
from typing import List, Optional

__all__ = ["migrate", "normalize_embed_url"]

# Attribute values may hold ">" when quoted.
_FIGURE_OPEN_RE = re.compile(r"""<figure\b(?:[^>"']|"[^"]*"|'[^']*')*>""", re.IGNORECASE)
_FIGURE_CLOSE_RE = re.compile(r"</figure\s*>", re.IGNORECASE)
_IMG_RE = re.compile(r"<img\b", re.IGNORECASE)
_IFRAME_OPEN_RE = re.compile(r"""<iframe\b(?:[^>"']|"[^"]*"|'[^']*')*>""", re.IGNORECASE)
_IFRAME_CLOSE_RE = re.compile(r"</iframe\s*>", re.IGNORECASE)
# name, then a double-quoted, single-quoted or unquoted value
_ATTR_RE = re.compile(r"""([^\s"'>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+)))?""")
_CONVERTED_RE = re.compile(r"data-oembed-url|<oembed\b", re.IGNORECASE)
# "<figure" and "<iframe" are both 7 chars long
_TAG_NAME_END = 7


def normalize_embed_url(url: str) -> str:
    """Force an ``https`` scheme onto protocol-relative or ``http`` URLs.

    Purely textual: the URL is not validated.
    """
    if url.startswith("//"):
        return "https:" + url
    if url[:7].lower() == "http://":
        return "https://" + url[7:]
    return url


def _find_attr(tag: str, name: str) -> Optional[re.Match]:
    """Find attribute ``name`` in an opening tag, skipping quoted values."""
    for match in _ATTR_RE.finditer(tag, _TAG_NAME_END, len(tag) - 1):
        if match.group(1).lower() == name:
            return match
    return None


def _attr_value(match: re.Match) -> str:
    for value in match.group(2, 3, 4):
        if value is not None:
            return value
    return ""


def _mark_figure(open_tag: str, marker: str, mark_classless: bool) -> str:
    """Return ``open_tag`` with ``marker`` prefixed to its class list."""
    match = _find_attr(open_tag, "class")
    if match is None:
        if not mark_classless:
            return open_tag
        return f'{open_tag[:_TAG_NAME_END]} class="{marker} "{open_tag[_TAG_NAME_END:]}'
    value = _attr_value(match)
    if marker in value.split():
        return open_tag
    # unquoted and bare values get double quotes
    quote = "'" if match.group(3) is not None else '"'
    return (
        open_tag[: match.start()]
        + f"{match.group(1)}={quote}{marker} {value}{quote}"
        + open_tag[match.end():]
    )


def _rewrite_iframe(body: str, media_preview_enabled: bool) -> str:
    """Convert the first iframe in a figure body to CKEditor's media syntax."""
    if _CONVERTED_RE.search(body):
        return body
    open_match = _IFRAME_OPEN_RE.search(body)
    if open_match is None:
        return body
    close_match = _IFRAME_CLOSE_RE.search(body, open_match.end())
    if close_match is None:
        return body
    src_match = _find_attr(open_match.group(0), "src")
    if src_match is None:
        return body

    # entities in the source text are kept as they are, only a raw quote would break out
    url = normalize_embed_url(_attr_value(src_match)).replace('"', "&quot;")
    if media_preview_enabled:
        iframe = body[open_match.start():close_match.end()]
        replacement = f'<div data-oembed-url="{url}">{iframe}</div>'
    else:
        replacement = f'<oembed url="{url}"></oembed>'
    return body[: open_match.start()] + replacement + body[close_match.end():]


def migrate(html: Optional[str], media_preview_enabled: bool, *, mark_classless: bool = True) -> str:
    """
    Rewrite legacy Redactor ``<figure>`` blocks into CKEditor syntax.

    Args:
        html: The stored HTML fragment.
        media_preview_enabled: Whether the editor config has
            ``mediaEmbed.previewsInData`` turned on.  Decides between the
            ``data-oembed-url`` wrapper and the ``<oembed>`` element.
        mark_classless: Add a ``class`` attribute to figures that have none.
            When ``False`` such figures keep no marker, as older releases did.

    Returns:
        The rewritten fragment.  Malformed input (a figure that is never
        closed) is returned untouched from that figure onwards.
    """
    if not html:
        return html or ""

    out: List[str] = []
    cursor = 0
    while True:
        open_match = _FIGURE_OPEN_RE.search(html, cursor)
        if open_match is None:
            break
        close_match = _FIGURE_CLOSE_RE.search(html, open_match.end())
        if close_match is None:
            break

        open_tag = open_match.group(0)
        body = html[open_match.end():close_match.start()]
        if _IMG_RE.search(body):
            open_tag = _mark_figure(open_tag, "image", mark_classless)
        elif _IFRAME_OPEN_RE.search(body):
            open_tag = _mark_figure(open_tag, "media", mark_classless)
        body = _rewrite_iframe(body, media_preview_enabled)

        out.append(html[cursor:open_match.start()])
        out.append(open_tag)
        out.append(body)
        out.append(close_match.group(0))
        cursor = close_match.end()

    out.append(html[cursor:])
    return "".join(out)
