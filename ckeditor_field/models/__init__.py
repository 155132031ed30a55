"""
Pydantic models for field settings, editor configs and the catalog records
the option builders work with.
"""

from .field_settings import (
    DEFAULT_TOOLBAR,
    CategoryGroup,
    EditorConfig,
    Element,
    FieldSettings,
    ImageTransform,
    Section,
    Site,
    Volume,
)

__all__ = [
    "DEFAULT_TOOLBAR",
    "CategoryGroup",
    "EditorConfig",
    "Element",
    "FieldSettings",
    "ImageTransform",
    "Section",
    "Site",
    "Volume",
]
