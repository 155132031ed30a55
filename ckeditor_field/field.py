"""
The CKEditor field adapter.

:class:`RichTextField` sits between the CMS and the editor.  On the display
path (:meth:`RichTextField.prep_value_for_input`) and on the persistence path
(:meth:`RichTextField.serialize_value`) it runs the Redactor → CKEditor figure
migration with the ``previewsInData`` flag of the field's editor config, so
both paths always agree on the media syntax.  Everything it needs from the
CMS (editor configs, volumes, permissions, ...) is passed in.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from ckeditor_field.models import EditorConfig, Element, FieldSettings
from ckeditor_field.options import asset_browser_settings, build_editor_config
from ckeditor_field.options.ports import (
    Catalog,
    EditorConfigStore,
    LinkOptionsHook,
    ModifyConfigHook,
    UserContext,
)
from ckeditor_field.parsers import migrate, normalize_for_editor


class FieldData:
    """Stored field content as handed over by the CMS."""

    def __init__(self, raw_content: Optional[str]) -> None:
        self.raw_content = raw_content

    def __str__(self) -> str:
        return self.raw_content or ""


class _EmptyCatalog:
    def all_volumes(self):
        return []

    def all_transforms(self):
        return []

    def transform_by_uid(self, uid):
        return None

    def all_sections(self):
        return []

    def all_sites(self):
        return []

    def all_category_groups(self):
        return []


class RichTextField:
    display_name = "CKEditor"

    def __init__(
        self,
        settings: Union[FieldSettings, Dict[str, Any], None] = None,
        *,
        config_store: Optional[EditorConfigStore] = None,
        catalog: Optional[Catalog] = None,
        user: Optional[UserContext] = None,
        link_hooks: Iterable[LinkOptionsHook] = (),
        config_hooks: Iterable[ModifyConfigHook] = (),
        field_id: Any = None,
    ) -> None:
        if settings is None:
            settings = FieldSettings()
        elif isinstance(settings, dict):
            settings = FieldSettings.model_validate(settings)
        self.settings = settings
        self.config_store = config_store
        self.catalog: Catalog = catalog if catalog is not None else _EmptyCatalog()
        self.user = user
        self.link_hooks: List[LinkOptionsHook] = list(link_hooks)
        self.config_hooks: List[ModifyConfigHook] = list(config_hooks)
        self.field_id = field_id

    def editor_config(self) -> EditorConfig:
        """The editor config selected in the settings, or the default one."""
        if self.settings.cke_config and self.config_store is not None:
            try:
                return self.config_store.get_by_uid(self.settings.cke_config)
            except KeyError:
                pass
        return EditorConfig()

    @property
    def media_previews_enabled(self) -> bool:
        return self.editor_config().media_previews_enabled

    def _migrate(self, value: str) -> str:
        return migrate(value, self.media_previews_enabled)

    def prep_value_for_input(self, value: Union[FieldData, str, None]) -> str:
        """Prepare a stored value for display in the editor."""
        if isinstance(value, FieldData):
            value = value.raw_content
        if value is None:
            return ""
        return self._migrate(normalize_for_editor(value))

    def serialize_value(self, value: Union[FieldData, str, None]) -> Optional[str]:
        """Prepare a submitted value for storage."""
        if isinstance(value, FieldData):
            value = value.raw_content
        if value is None:
            return None
        return self._migrate(value)

    def static_html(self, value: Union[FieldData, str, None]) -> str:
        """Read-only rendering of the value, e.g. for revisions."""
        return f"<div>{self.prep_value_for_input(value) or '&nbsp;'}</div>"

    def input_config(self, element: Optional[Element] = None) -> Dict[str, Any]:
        return build_editor_config(
            self.settings,
            self.editor_config(),
            self.catalog,
            self.user,
            element,
            link_hooks=self.link_hooks,
            config_hooks=self.config_hooks,
        )

    def asset_browser_settings(self, kind: Optional[str] = None) -> Dict[str, Any]:
        return asset_browser_settings(self.field_id, self.settings, self.catalog, self.user, kind)
