"""
Source and option lists the editor needs to browse links, assets and image
transforms.

Each helper takes the field settings plus the injected catalog / user
capabilities and returns plain JSON-ready data.  Source keys follow the
CMS conventions: ``volume:<uid>``, ``section:<uid>``, ``group:<uid>``,
``singles`` and ``*``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ckeditor_field.models import Element, FieldSettings, ImageTransform, Volume

from .ports import Catalog, LinkOptionsHook, UserContext

ENTRY = "Entry"
CATEGORY = "Category"
ASSET = "Asset"

REF_HANDLES: Dict[str, str] = {
    ENTRY: "entry",
    CATEGORY: "category",
    ASSET: "asset",
}


def _allowed(selection, uid: str) -> bool:
    if selection == "*":
        return True
    return isinstance(selection, list) and uid in selection


def allowed_volumes(settings: FieldSettings, catalog: Catalog, user: Optional[UserContext]) -> List[Volume]:
    """Volumes the field allows that ``user`` may also view."""
    if not settings.available_volumes:
        return []
    volumes = [v for v in catalog.all_volumes() if _allowed(settings.available_volumes, v.uid)]
    if not settings.show_unpermitted_volumes:
        volumes = [
            v for v in volumes
            if user is not None and user.check_permission(f"viewAssets:{v.uid}")
        ]
    return volumes


def volume_sources(settings: FieldSettings, catalog: Catalog, user: Optional[UserContext]) -> List[str]:
    return [f"volume:{v.uid}" for v in allowed_volumes(settings, catalog, user)]


def allowed_transforms(settings: FieldSettings, catalog: Catalog) -> List[ImageTransform]:
    if not settings.available_transforms:
        return []
    return [t for t in catalog.all_transforms() if _allowed(settings.available_transforms, t.uid)]


def transforms(settings: FieldSettings, catalog: Catalog) -> List[Dict[str, str]]:
    """Transforms offered in the image toolbar, as ``{"handle", "name"}``."""
    return [{"handle": t.handle, "name": t.name} for t in allowed_transforms(settings, catalog)]


def section_sources(catalog: Catalog, element: Optional[Element] = None) -> List[str]:
    """
    Entry sources links may target.

    Singles are grouped under one ``singles`` source.  Other sections are
    only listed when an element is given, once per site where the section
    has URLs.
    """
    sources: List[str] = []
    show_singles = False
    sites = catalog.all_sites()

    for section in catalog.all_sections():
        if section.type == "single":
            show_singles = True
        elif element is not None:
            for site in sites:
                if section.site_settings.get(site.id):
                    sources.append(f"section:{section.uid}")

    if show_singles:
        sources.insert(0, "singles")
    if sources:
        sources.insert(0, "*")
    return sources


def category_sources(catalog: Catalog, element: Optional[Element] = None) -> List[str]:
    if element is None:
        return []
    return [
        f"group:{group.uid}"
        for group in catalog.all_category_groups()
        if group.site_settings.get(element.site_id, False)
    ]


def link_options(
    settings: FieldSettings,
    catalog: Catalog,
    user: Optional[UserContext],
    element: Optional[Element] = None,
    hooks: Iterable[LinkOptionsHook] = (),
) -> List[Dict[str, Any]]:
    """
    Build the entries of the editor's Link dropdown.

    Each option has ``label``, ``elementType``, ``refHandle``, ``sources``
    and optionally ``criteria``.  Hooks run in order and may return a new
    list to replace the current one; returning ``None`` keeps the list they
    were given (which they may have mutated).
    """
    options: List[Dict[str, Any]] = []

    sections = section_sources(catalog, element)
    categories = category_sources(catalog, element)
    volumes = volume_sources(settings, catalog, user)

    if sections:
        options.append({
            "label": "Link to an entry",
            "elementType": ENTRY,
            "refHandle": REF_HANDLES[ENTRY],
            "sources": sections,
            "criteria": {"uri": ":notempty:"},
        })

    if categories:
        options.append({
            "label": "Link to a category",
            "elementType": CATEGORY,
            "refHandle": REF_HANDLES[CATEGORY],
            "sources": categories,
        })

    if volumes:
        criteria: Dict[str, Any] = {}
        if settings.show_unpermitted_files:
            criteria["uploaderId"] = None
        options.append({
            "label": "Link to an asset",
            "elementType": ASSET,
            "refHandle": REF_HANDLES[ASSET],
            "sources": volumes,
            "criteria": criteria,
        })

    for hook in hooks:
        result = hook(options)
        if result is not None:
            options = result

    for option in options:
        if not option.get("refHandle"):
            element_type = option["elementType"]
            option["refHandle"] = REF_HANDLES.get(element_type, element_type)
    return options
