import pytest

from orbgeo.geometry import Bound, LineString, Point
from orbgeo.properties import BBox, Properties, new_bbox


@pytest.fixture
def props():
    return Properties(
        {
            "bool": True,
            "falsebool": False,
            "int": 1.0,
            "float64": 1.2,
            "string": "text",
        }
    )


def test_must_bool(props):
    assert props.must_bool("random", True) is True
    assert props.must_bool("falsebool", True) is False
    assert props.must_bool("falsebool") is False


def test_must_bool_errors(props):
    with pytest.raises(TypeError):
        props.must_bool("string")
    with pytest.raises(KeyError):
        props.must_bool("random")


def test_must_int(props):
    assert props.must_int("random", 10) == 10
    assert props.must_int("int", 10) == 1
    assert props.must_int("int") == 1
    props["true_int"] = 5
    assert props.must_int("true_int") == 5
    assert props.must_int("float64") == 1


def test_must_int_errors(props):
    with pytest.raises(TypeError):
        props.must_int("string")
    with pytest.raises(KeyError):
        props.must_int("random")


def test_must_float(props):
    assert props.must_float("random", 10) == 10
    assert props.must_float("float64", 10.0) == 1.2
    assert props.must_float("float64") == 1.2
    props["int"] = 1
    assert props.must_float("int") == 1.0


def test_must_float_errors(props):
    with pytest.raises(TypeError):
        props.must_float("bool")
    with pytest.raises(KeyError):
        props.must_float("random")


def test_must_string(props):
    assert props.must_string("random", "something") == "something"
    assert props.must_string("string", "something") == "text"
    assert props.must_string("string") == "text"


def test_must_string_errors(props):
    with pytest.raises(TypeError):
        props.must_string("int")
    with pytest.raises(KeyError):
        props.must_string("random")


def test_clone():
    props = Properties({"one": 2})
    cloned = props.clone()
    assert cloned["one"] == 2
    cloned["one"] = 3
    assert props["one"] == 2


def test_new_bbox():
    b = LineString([(1, 3), (0, 4)]).bound()
    assert new_bbox(b) == [0, 3, 1, 4]


@pytest.mark.parametrize(
    "values,result",
    [
        ([1, 2, 3, 4], True),
        ([1, 2, 3, 4, 5, 6], True),
        (None, False),
        ([1, 2, 3], False),
        ([1, 2, 3, 4, 5], False),
    ],
)
def test_bbox_valid(values, result):
    assert BBox(values).valid() is result


@pytest.mark.parametrize(
    "values,expected",
    [
        ([1, 2, 3], Bound()),
        ([1, 2, 3, 4], Bound(Point(1, 2), Point(3, 4))),
        ([1, 2, 3, 4, 5, 6], Bound(Point(1, 2), Point(4, 5))),
    ],
)
def test_bbox_bound(values, expected):
    assert BBox(values).bound().equal(expected)