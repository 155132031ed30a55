import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from ckeditor_field.parsers.input_normalizer import normalize_for_editor


def test_nbsp_characters_become_entities():
    assert normalize_for_editor("a\xa0b\xa0\xa0c") == "a&nbsp;b&nbsp;&nbsp;c"


def test_xhtml_void_tags_lose_their_slash():
    assert normalize_for_editor("<p>a<br />b</p><hr />") == "<p>a<br>b</p><hr>"


def test_only_exact_self_closing_forms_are_rewritten():
    html = '<br/><img src="a.png" /><div />'
    assert normalize_for_editor(html) == html


def test_empty_values():
    assert normalize_for_editor("") == ""
    assert normalize_for_editor(None) == ""
