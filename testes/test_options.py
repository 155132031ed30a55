import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from ckeditor_field.models import EditorConfig, Element, FieldSettings
from ckeditor_field.options import (
    AssetBrowserError,
    asset_browser_settings,
    build_editor_config,
    category_sources,
    link_options,
    section_sources,
    transforms,
    volume_sources,
)
from fakes import FakeCatalog, FakeUser


def test_volume_sources_respect_view_permissions():
    user = FakeUser(permissions={"viewAssets:vol-a"})
    assert volume_sources(FieldSettings(), FakeCatalog(), user) == ["volume:vol-a"]


def test_volume_sources_show_unpermitted_volumes():
    settings = FieldSettings(show_unpermitted_volumes=True)
    assert volume_sources(settings, FakeCatalog(), None) == ["volume:vol-a", "volume:vol-b"]


def test_volume_sources_restricted_to_selected_uids():
    settings = FieldSettings(available_volumes=["vol-b"], show_unpermitted_volumes=True)
    assert volume_sources(settings, FakeCatalog(), None) == ["volume:vol-b"]


def test_no_volumes_selected():
    settings = FieldSettings(available_volumes=None)
    user = FakeUser(permissions={"viewAssets:vol-a"})
    assert volume_sources(settings, FakeCatalog(), user) == []


def test_transforms_filtered_by_uid():
    catalog = FakeCatalog()
    assert transforms(FieldSettings(), catalog) == [
        {"handle": "thumb", "name": "Thumbnail"},
        {"handle": "hero", "name": "Hero"},
    ]
    assert transforms(FieldSettings(available_transforms=["tr-hero"]), catalog) == [
        {"handle": "hero", "name": "Hero"},
    ]
    assert transforms(FieldSettings(available_transforms=""), catalog) == []


def test_section_sources_without_element_only_lists_singles():
    assert section_sources(FakeCatalog()) == ["*", "singles"]


def test_section_sources_with_element_lists_sections_with_urls():
    assert section_sources(FakeCatalog(), Element(site_id=1)) == ["*", "singles", "section:sec-news"]


def test_section_sources_empty_catalog():
    assert section_sources(FakeCatalog(sections=[]), Element(site_id=1)) == []


def test_category_sources():
    catalog = FakeCatalog()
    assert category_sources(catalog) == []
    assert category_sources(catalog, Element(site_id=1)) == ["group:grp-topics"]
    assert category_sources(catalog, Element(site_id=2)) == []


def test_link_options_for_entry_category_and_asset():
    settings = FieldSettings(show_unpermitted_files=True)
    user = FakeUser(permissions={"viewAssets:vol-a"})
    options = link_options(settings, FakeCatalog(), user, Element(site_id=1))

    assert [o["label"] for o in options] == ["Link to an entry", "Link to a category", "Link to an asset"]
    assert options[0]["criteria"] == {"uri": ":notempty:"}
    assert options[1]["sources"] == ["group:grp-topics"]
    assert options[2]["sources"] == ["volume:vol-a"]
    assert options[2]["criteria"] == {"uploaderId": None}
    assert [o["refHandle"] for o in options] == ["entry", "category", "asset"]


def test_link_option_hooks_can_add_and_replace_options():
    def add_product(options):
        options.append({"label": "Link to a product", "elementType": "Product", "sources": ["*"]})

    def drop_assets(options):
        return [o for o in options if o["elementType"] != "Asset"]

    options = link_options(
        FieldSettings(),
        FakeCatalog(),
        FakeUser(permissions={"viewAssets:vol-a"}),
        hooks=[add_product, drop_assets],
    )
    assert [o["elementType"] for o in options] == ["Entry", "Product"]
    # missing ref handles fall back to the element type
    assert options[-1]["refHandle"] == "Product"


def test_asset_browser_settings():
    settings = FieldSettings(default_transform="tr-thumb", show_unpermitted_files=True)
    user = FakeUser(permissions={"viewAssets:vol-a", "viewAssets:vol-b"})
    modal = asset_browser_settings(12, settings, FakeCatalog(), user, kind="image")

    assert modal["storageKey"] == "CKEditor:12:image"
    assert modal["sources"] == ["volume:vol-a", "volume:vol-b"]
    assert modal["criteria"] == {"kind": "image", "uploaderId": None}
    assert modal["defaultTransform"] == "thumb"
    assert modal["multiSelect"] is False
    assert asset_browser_settings(12, FieldSettings(), FakeCatalog(), user)["storageKey"] == "CKEditor:12:*"


def test_asset_browser_requires_volumes():
    with pytest.raises(AssetBrowserError):
        asset_browser_settings(1, FieldSettings(available_volumes=[]), FakeCatalog(), FakeUser())


def test_source_editing_removed_for_non_admins():
    editor = EditorConfig(toolbar=["bold", "sourceEditing"])
    catalog = FakeCatalog()

    config = build_editor_config(FieldSettings(), editor, catalog, FakeUser())
    assert config["toolbar"] == ["bold"]

    config = build_editor_config(FieldSettings(), editor, catalog, FakeUser(is_admin=True))
    assert config["toolbar"] == ["bold", "sourceEditing"]

    settings = FieldSettings(enable_source_editing_for_non_admins=True)
    config = build_editor_config(settings, editor, catalog, FakeUser())
    assert config["toolbar"] == ["bold", "sourceEditing"]


def test_base_config_contents():
    settings = FieldSettings(default_transform="tr-hero")
    editor = EditorConfig(heading_levels=[2, 3])
    config = build_editor_config(settings, editor, FakeCatalog(), FakeUser(), Element(site_id=2, language="de-DE"))

    assert config["defaultTransform"] == "hero"
    assert config["elementSiteId"] == 2
    assert config["language"] == {"ui": "en-GB", "content": "de-DE"}
    assert [o["model"] for o in config["heading"]["options"]] == ["paragraph", "heading2", "heading3"]
    assert config["heading"]["options"][1]["view"] == "h2"
    assert config["ui"] == {"viewportOffset": {"top": 50}}
    assert config["removePlugins"] == ["WordCount"]


def test_editor_options_override_hooks_and_word_count():
    editor = EditorConfig(options={"removePlugins": ["Table"], "toolbar": ["italic"]})

    def hook(base, editor_config):
        base["toolbar"] = ["bold"]
        base["custom"] = editor_config.name

    config = build_editor_config(FieldSettings(), editor, FakeCatalog(), None, config_hooks=[hook])
    assert config["toolbar"] == ["italic"]
    assert config["custom"] == "Simple"
    assert config["removePlugins"] == ["Table", "WordCount"]
    assert config["language"] == {"ui": "en-US", "content": "en-US"}

    config = build_editor_config(FieldSettings(show_word_count=True), editor, FakeCatalog(), None)
    assert config["wordCount"] == {}
    assert config["removePlugins"] == ["Table"]
