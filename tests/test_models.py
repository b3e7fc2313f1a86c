import pytest
from pydantic import ValidationError as PydanticValidationError

from css_selector_builder import Rectangle, SelectorSpec, ParseError, get_json, from_json

def test_rectangle():
    r = Rectangle(10, 20)
    assert r.width == 10
    assert r.height == 20
    assert r.get_area() == 200

def test_rectangle_keywords():
    assert Rectangle(width=2.5, height=4).get_area() == 10.0

def test_get_json():
    assert get_json([1, 2, 3]) == "[1,2,3]"
    assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'
    assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

def test_from_json_passes_values_positionally():
    r = from_json(Rectangle, '{"width":10,"height":20}')
    assert isinstance(r, Rectangle)
    assert r.get_area() == 200

def test_from_json_plain_class():
    class Circle:
        def __init__(self, radius):
            self.radius = radius

    assert from_json(Circle, '{"radius":10}').radius == 10

def test_from_json_invalid():
    with pytest.raises(ParseError):
        from_json(Rectangle, "not json")

def test_selector_spec_defaults():
    spec = SelectorSpec()
    assert spec.element is None
    assert spec.classes == []
    assert spec.pseudo_element is None

def test_selector_spec_forbids_unknown_fields():
    with pytest.raises(PydanticValidationError):
        SelectorSpec(tag="div")
