import json

import pytest

from cssbuilder.core.objects import Rectangle, from_json, get_json


class _Circle:
    def __init__(self, radius):
        self.radius = radius


def test_rectangle_area():
    r = Rectangle(10, 20)

    assert r.width == 10
    assert r.height == 20
    assert r.get_area() == 200


def test_rectangle_area_reflects_current_fields():
    r = Rectangle(10, 20)
    r.width = 5

    assert r.get_area() == 100


@pytest.mark.parametrize(
    "value, expected",
    [
        ([1, 2, 3], "[1,2,3]"),
        ({"height": 10, "width": 20}, '{"height":10,"width":20}'),
        ({"a": [1, {"b": None}]}, '{"a":[1,{"b":null}]}'),
    ],
)
def test_get_json(value, expected: str):
    assert get_json(value) == expected


def test_get_json_output_parses_back_to_original():
    original = {"height": 10, "width": 20}

    assert json.loads(get_json(original)) == original


def test_from_json_builds_rectangle_from_class():
    r = from_json(Rectangle, '{"width":10,"height":20}')

    assert isinstance(r, Rectangle)
    assert (r.width, r.height, r.get_area()) == (10, 20, 200)


def test_from_json_accepts_instance_as_prototype():
    c = from_json(_Circle(1), '{"radius":10}')

    assert isinstance(c, _Circle)
    assert c.radius == 10


def test_from_json_propagates_parse_errors():
    with pytest.raises(json.JSONDecodeError):
        from_json(Rectangle, "{not json")


def test_from_json_propagates_arity_errors():
    with pytest.raises(TypeError):
        from_json(Rectangle, '{"width":10}')
