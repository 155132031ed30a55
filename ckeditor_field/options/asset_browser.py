from __future__ import annotations

from typing import Any, Dict, Optional

from ckeditor_field.models import FieldSettings

from .ports import Catalog, UserContext
from .sources import ASSET, transforms, volume_sources


class AssetBrowserError(Exception):
    """Raised when the asset browser cannot be opened for a field."""
    pass


def asset_browser_settings(
    field_id: Any,
    settings: FieldSettings,
    catalog: Catalog,
    user: Optional[UserContext],
    kind: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Settings for the asset selector modal opened from the editor.

    Args:
        field_id: Identifier of the field, used in the modal's storage key.
        settings: The field settings.
        catalog: Catalog of volumes and transforms.
        user: The current user; ``None`` only sees volumes when the field
            shows unpermitted volumes.
        kind: Optional asset kind filter (``"image"``, ``"video"``, ...).

    Raises:
        AssetBrowserError: If the field has no volumes configured at all.
    """
    if not settings.available_volumes:
        raise AssetBrowserError("The CKEditor field does not have access to any volumes.")

    criteria: Dict[str, Any] = {"kind": kind}
    if settings.show_unpermitted_files:
        criteria["uploaderId"] = None

    default_transform = None
    if settings.default_transform:
        transform = catalog.transform_by_uid(settings.default_transform)
        default_transform = transform.handle if transform else None

    return {
        "elementType": ASSET,
        "defaultTransform": default_transform,
        "storageKey": f"CKEditor:{field_id}:{kind or '*'}",
        "sources": volume_sources(settings, catalog, user),
        "criteria": criteria,
        "transforms": transforms(settings, catalog),
        "multiSelect": False,
        "showSiteMenu": False,
        "modalTitle": "Select asset",
        "fullscreen": True,
        "hideOnShadeClick": False,
        "hideOnSelect": False,
        "resizable": False,
    }
