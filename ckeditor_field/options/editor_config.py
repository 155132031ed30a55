"""
Assembly of the client-side CKEditor configuration object.

The result is what the field hands to ``Ckeditor.create()``: a base config
built from the field settings and CMS catalog, adjusted by modify-config
hooks, with the editor config's own ``options`` merged on top.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, List, Optional

from ckeditor_field.models import EditorConfig, Element, FieldSettings

from .ports import Catalog, LinkOptionsHook, ModifyConfigHook, UserContext
from .sources import link_options, transforms

DEFAULT_LANGUAGE = "en-US"


def heading_options(levels: Optional[List[int]]) -> List[Dict[str, str]]:
    options = [{
        "model": "paragraph",
        "title": "Paragraph",
        "class": "ck-heading_paragraph",
    }]
    for level in levels or []:
        options.append({
            "model": f"heading{level}",
            "view": f"h{level}",
            "title": f"Heading {level}",
            "class": f"ck-heading_heading{level}",
        })
    return options


def toolbar_for(settings: FieldSettings, editor_config: EditorConfig, user: Optional[UserContext]) -> List[str]:
    """The editor toolbar, without source editing for non-admins unless allowed."""
    toolbar = list(editor_config.toolbar)
    is_admin = bool(user is not None and user.is_admin)
    if not settings.enable_source_editing_for_non_admins and not is_admin:
        toolbar = [item for item in toolbar if item != "sourceEditing"]
    return toolbar


def build_base_config(
    settings: FieldSettings,
    editor_config: EditorConfig,
    catalog: Catalog,
    user: Optional[UserContext],
    element: Optional[Element] = None,
    link_hooks: Iterable[LinkOptionsHook] = (),
) -> Dict[str, Any]:
    default_transform = None
    if settings.default_transform:
        transform = catalog.transform_by_uid(settings.default_transform)
        default_transform = transform.handle if transform else None

    ui_language = getattr(user, "language", None) or DEFAULT_LANGUAGE
    content_language = (element.language if element is not None else None) or ui_language

    return {
        "defaultTransform": default_transform,
        "elementSiteId": element.site_id if element is not None else None,
        "heading": {"options": heading_options(editor_config.heading_levels)},
        "image": {"toolbar": ["toggleImageCaption", "imageTextAlternative"]},
        "language": {"ui": ui_language, "content": content_language},
        "linkOptions": link_options(settings, catalog, user, element, hooks=link_hooks),
        "table": {"contentToolbar": ["tableRow", "tableColumn", "mergeTableCells"]},
        "toolbar": toolbar_for(settings, editor_config, user),
        "transforms": transforms(settings, catalog),
        "ui": {"viewportOffset": {"top": 50}},
    }


def build_editor_config(
    settings: FieldSettings,
    editor_config: EditorConfig,
    catalog: Catalog,
    user: Optional[UserContext],
    element: Optional[Element] = None,
    *,
    link_hooks: Iterable[LinkOptionsHook] = (),
    config_hooks: Iterable[ModifyConfigHook] = (),
) -> Dict[str, Any]:
    """
    Build the full config object passed to the editor.

    Modify-config hooks run after the base config is built and before the
    editor config options are merged, so options always win over hooks.
    Keys are merged shallowly, like ``Object.assign``.
    """
    config = build_base_config(settings, editor_config, catalog, user, element, link_hooks)
    for hook in config_hooks:
        result = hook(config, editor_config)
        if result is not None:
            config = result

    if editor_config.options:
        config.update(copy.deepcopy(editor_config.options))

    if settings.show_word_count:
        if not isinstance(config.get("wordCount"), dict):
            config["wordCount"] = {}
    else:
        remove_plugins = list(config.get("removePlugins") or [])
        remove_plugins.append("WordCount")
        config["removePlugins"] = remove_plugins
    return config
