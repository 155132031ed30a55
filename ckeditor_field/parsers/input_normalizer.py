from __future__ import annotations

from typing import Dict

# HTML void elements; CKEditor writes them without the XHTML slash.
VOID_ELEMENTS = (
    "area", "base", "br", "col", "command", "embed", "hr", "img", "input",
    "keygen", "link", "meta", "param", "source", "track", "wbr",
)

_PAIRS: Dict[str, str] = {"\xa0": "&nbsp;"}
_PAIRS.update({f"<{tag} />": f"<{tag}>" for tag in VOID_ELEMENTS})


def normalize_for_editor(html: str) -> str:
    """
    Bring stored HTML to the shape CKEditor itself would produce.

    - Raw non-breaking spaces become ``&nbsp;`` entities
    - Self-closing void tags written as ``<br />`` become ``<br>``

    Without this the editor normalizes the value on load and the field
    looks modified even when nobody touched it.
    """
    if not html:
        return html or ""
    for search, replace in _PAIRS.items():
        html = html.replace(search, replace)
    return html
