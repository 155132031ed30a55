"""
Capabilities the option builders need from the host CMS.

The field never talks to the CMS directly; callers pass objects satisfying
these protocols.  Tests use small in-memory fakes.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Protocol

from ckeditor_field.models import (
    CategoryGroup,
    EditorConfig,
    ImageTransform,
    Section,
    Site,
    Volume,
)


class Catalog(Protocol):
    """Read access to the CMS structures links and assets can point to."""

    def all_volumes(self) -> List[Volume]:
        ...

    def all_transforms(self) -> List[ImageTransform]:
        ...

    def transform_by_uid(self, uid: str) -> Optional[ImageTransform]:
        ...

    def all_sections(self) -> List[Section]:
        ...

    def all_sites(self) -> List[Site]:
        ...

    def all_category_groups(self) -> List[CategoryGroup]:
        ...


class UserContext(Protocol):
    """The user the editor is being rendered for."""

    is_admin: bool
    language: str

    def check_permission(self, permission: str) -> bool:
        ...


class EditorConfigStore(Protocol):
    def get_by_uid(self, uid: str) -> EditorConfig:
        """Return the config or raise ``KeyError`` for an unknown uid."""
        ...


# A define-link-options hook receives the current list and may return a new one.
LinkOptionsHook = Callable[[List[Dict[str, Any]]], Optional[List[Dict[str, Any]]]]
# A modify-config hook receives the base config and the editor config.
ModifyConfigHook = Callable[[Dict[str, Any], EditorConfig], Optional[Dict[str, Any]]]
