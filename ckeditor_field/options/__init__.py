"""
Option sources and client configuration for the editor.

Everything here is pure data assembly over injected capabilities
(:mod:`ckeditor_field.options.ports`); nothing talks to a real CMS.
"""

from .asset_browser import AssetBrowserError, asset_browser_settings
from .editor_config import build_base_config, build_editor_config, heading_options, toolbar_for
from .sources import (
    category_sources,
    link_options,
    section_sources,
    transforms,
    volume_sources,
)

__all__ = [
    "AssetBrowserError",
    "asset_browser_settings",
    "build_base_config",
    "build_editor_config",
    "heading_options",
    "toolbar_for",
    "category_sources",
    "link_options",
    "section_sources",
    "transforms",
    "volume_sources",
]
