from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# "*" means every item, a list restricts to those uids, None/empty means none.
SourceSelection = Union[str, list[str], None]

# Settings older releases stored that no longer mean anything.
_OBSOLETE_KEYS = ("initJs", "removeInlineStyles", "removeEmptyTags", "removeNbsp")

DEFAULT_TOOLBAR = ["heading", "|", "bold", "italic", "link"]


class FieldSettings(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    cke_config: Optional[str] = Field(None, alias="ckeConfig")
    show_word_count: bool = Field(False, alias="showWordCount")
    available_volumes: SourceSelection = Field("*", alias="availableVolumes")
    available_transforms: SourceSelection = Field("*", alias="availableTransforms")
    default_transform: Optional[str] = Field(None, alias="defaultTransform")
    enable_source_editing_for_non_admins: bool = Field(False, alias="enableSourceEditingForNonAdmins")
    show_unpermitted_volumes: bool = Field(False, alias="showUnpermittedVolumes")
    show_unpermitted_files: bool = Field(False, alias="showUnpermittedFiles")

    @model_validator(mode="before")
    @classmethod
    def _drop_obsolete(cls, data: Any):
        if isinstance(data, dict):
            data = {k: v for k, v in data.items() if k not in _OBSOLETE_KEYS}
        return data

    @field_validator("available_volumes", "available_transforms", mode="before")
    @classmethod
    def _empty_selection(cls, v: SourceSelection):
        if v == "" or v == []:
            return None
        return v

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class EditorConfig(BaseModel):
    """A named CKEditor configuration shared between fields."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    uid: Optional[str] = None
    name: str = "Simple"
    toolbar: list[str] = Field(default_factory=lambda: list(DEFAULT_TOOLBAR))
    heading_levels: Optional[list[int]] = Field(default_factory=lambda: [1, 2, 3, 4, 5, 6], alias="headingLevels")
    options: Optional[dict[str, Any]] = None

    @property
    def media_previews_enabled(self) -> bool:
        media_embed = (self.options or {}).get("mediaEmbed")
        return isinstance(media_embed, dict) and media_embed.get("previewsInData") is True


class Volume(BaseModel):
    uid: str
    name: str = ""


class ImageTransform(BaseModel):
    uid: str
    handle: str
    name: str = ""


class Site(BaseModel):
    id: int
    language: str = "en-US"


class Section(BaseModel):
    uid: str
    type: str = "channel"  # "single" | "channel" | "structure"
    # site id -> whether entries in the section have URLs on that site
    site_settings: dict[int, bool] = Field(default_factory=dict)


class CategoryGroup(BaseModel):
    uid: str
    site_settings: dict[int, bool] = Field(default_factory=dict)


class Element(BaseModel):
    """The element (entry, category, ...) that owns the field value."""

    model_config = ConfigDict(extra="allow")

    site_id: int
    language: Optional[str] = None
