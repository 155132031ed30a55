import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from ckeditor_field.field import FieldData, RichTextField
from ckeditor_field.models import Element
from fakes import FakeCatalog, FakeConfigStore, FakeUser, previews_config

VIDEO = '<figure><iframe src="//v.example/1"></iframe></figure>'


def test_editor_config_falls_back_to_default():
    assert RichTextField().editor_config().name == "Simple"
    field = RichTextField({"ckeConfig": "missing"}, config_store=FakeConfigStore(previews_config()))
    assert field.editor_config().uid is None
    assert field.media_previews_enabled is False


def test_preview_flag_comes_from_selected_editor_config():
    field = RichTextField({"ckeConfig": "cfg-previews"}, config_store=FakeConfigStore(previews_config()))
    assert field.media_previews_enabled is True
    assert 'data-oembed-url="https://v.example/1"' in field.serialize_value(VIDEO)


def test_display_and_persistence_paths_agree():
    field = RichTextField()
    stored = field.serialize_value(VIDEO)
    assert stored == '<figure class="media "><oembed url="https://v.example/1"></oembed></figure>'
    assert field.prep_value_for_input(stored) == stored
    assert field.prep_value_for_input(VIDEO) == stored


def test_prep_value_for_input_normalizes_and_unwraps():
    field = RichTextField()
    value = FieldData('<p>a\xa0b<br /></p><figure><img src="x.png"></figure>')
    assert field.prep_value_for_input(value) == (
        '<p>a&nbsp;b<br></p><figure class="image "><img src="x.png"></figure>'
    )
    assert field.prep_value_for_input(None) == ""
    assert field.prep_value_for_input(FieldData(None)) == ""


def test_serialize_value_keeps_none_and_does_not_normalize():
    field = RichTextField()
    assert field.serialize_value(None) is None
    assert field.serialize_value(FieldData(None)) is None
    assert field.serialize_value("<p>a\xa0b</p>") == "<p>a\xa0b</p>"


def test_static_html():
    field = RichTextField()
    assert field.static_html(None) == "<div>&nbsp;</div>"
    assert field.static_html("<p>x</p>") == "<div><p>x</p></div>"


def test_input_config_uses_injected_capabilities():
    field = RichTextField(
        {"defaultTransform": "tr-thumb", "showWordCount": True},
        catalog=FakeCatalog(),
        user=FakeUser(permissions={"viewAssets:vol-b"}),
        link_hooks=[lambda options: [o for o in options if o["elementType"] == "Asset"]],
    )
    config = field.input_config(Element(site_id=1))
    assert config["defaultTransform"] == "thumb"
    assert [o["sources"] for o in config["linkOptions"]] == [["volume:vol-b"]]
    assert config["wordCount"] == {}


def test_asset_browser_settings_for_field():
    field = RichTextField(
        {"showUnpermittedVolumes": True},
        catalog=FakeCatalog(),
        field_id=7,
    )
    modal = field.asset_browser_settings("image")
    assert modal["storageKey"] == "CKEditor:7:image"
    assert modal["sources"] == ["volume:vol-a", "volume:vol-b"]


def test_field_without_catalog_has_empty_sources():
    config = RichTextField().input_config()
    assert config["linkOptions"] == []
    assert config["transforms"] == []


def test_field_accepts_only_used_options():
    field = RichTextField(field_id=7)
    assert field.field_id == 7
    assert not hasattr(field, "handle")
    with pytest.raises(TypeError):
        RichTextField(handle="body")
