import pytest
from pathlib import Path
import tempfile
import json

from css_selector_builder.utils import (
    normalize_selector,
    extract_selector_parts,
    is_valid_file_path,
    load_json_data,
    merge_selector_results,
    is_valid_html_content,
    get_selector_specificity
)
from css_selector_builder.exceptions import ValidationError

@pytest.mark.parametrize("selector, expected", [
    (" div  >  span ", "div>span"),
    ("div[attr = value]", "div[attr=value]"),
    ("div [ data-test = value ]", "div [data-test=value]"),
    ("a  +  b", "a+b"),
    ("tr:nth-of-type(even)   td:nth-of-type(even)", "tr:nth-of-type(even) td:nth-of-type(even)"),
    ('a[href$=".png"]:focus', 'a[href$=".png"]:focus'),
    ("ul .item", "ul .item"),
    ('a[title="a > b"]', 'a[title="a > b"]'),
    ('a[title="k = v"]', 'a[title="k = v"]'),
    ('a[title="two  spaces"]  >  b', 'a[title="two  spaces"]>b'),
    ('input[ type = "text" i ]', 'input[type="text" i]'),
    ("li:nth-child(2n + 1)", "li:nth-child(2n + 1)"),
    ("", ""),
])
def test_normalize_selector(selector, expected):
    assert normalize_selector(selector) == expected

def test_extract_selector_parts():
    parts = extract_selector_parts("div#id.class-name[attr=value]:hover")

    assert parts["tag"] == "div"
    assert parts["id"] == "id"
    assert parts["classes"] == ["class-name"]
    assert parts["attributes"] == ["attr=value"]
    assert parts["pseudo"] == ["hover"]

def test_extract_selector_parts_ignores_attribute_values():
    parts = extract_selector_parts('a[href$=".png"]')
    assert parts["classes"] == []
    assert parts["attributes"] == ['href$=".png"']

@pytest.mark.parametrize("selector, expected", [
    ("div", (0, 0, 1)),
    ("div.class", (0, 1, 1)),
    ("div#id", (1, 0, 1)),
    ("div.class1.class2", (0, 2, 1)),
    ("div#id.class[attr]:hover", (1, 3, 1)),
    ("p::before", (0, 0, 2)),
    ("*", (0, 0, 0)),
    ("ul > li ~ li.last", (0, 1, 3)),
    ('[title="a > b"]', (0, 1, 0)),
])
def test_get_selector_specificity(selector, expected):
    assert get_selector_specificity(selector) == expected

def test_is_valid_file_path():
    with tempfile.NamedTemporaryFile() as tmp:
        assert is_valid_file_path(tmp.name) is True

    assert is_valid_file_path("nonexistent.json") is False

def test_load_json_data(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"test": "data"}), encoding="utf-8")
    assert load_json_data(path) == {"test": "data"}

def test_load_json_data_invalid(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{oops", encoding="utf-8")
    with pytest.raises(ValidationError, match="Invalid JSON format"):
        load_json_data(path)

def test_merge_selector_results():
    base_results = {
        "selectors": {"title": "h1"},
        "processed_selectors": {
            "title": {"processed": "h1", "is_valid": True}
        },
        "all_valid": True
    }

    new_results = {
        "processed_selectors": {
            "content": {"processed": "div.content", "is_valid": False}
        },
        "html_validation": {
            "content": True
        },
        "all_valid": False
    }

    merged = merge_selector_results(base_results, new_results)

    assert "title" in merged["processed_selectors"]
    assert "content" in merged["processed_selectors"]
    assert merged["selectors"] == {"title": "h1"}
    assert merged["all_valid"] is False
    assert merged["html_validation"]["content"] is True
    assert "content" not in base_results["processed_selectors"]

def test_is_valid_html_content():
    valid_html = """
    <!DOCTYPE html>
    <html>
        <body>
            <div>Content</div>
        </body>
    </html>
    """

    invalid_html = """
    This is not HTML content
    Just some random text
    """

    assert is_valid_html_content(valid_html) is True
    assert is_valid_html_content(invalid_html) is False
    assert is_valid_html_content("<invalid<html>") is False
    assert is_valid_html_content('<html><body><a title="x<b">link</a></body></html>') is True
    assert is_valid_html_content("") is False
