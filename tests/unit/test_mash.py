import pytest

from instagram_client.domain.mash import Mash


def test_keys_and_attributes_are_equivalent():
    m = Mash({"username": "snoopdogg", "counts": {"media": 10}})
    assert m.username == m["username"] == "snoopdogg"
    assert m.counts.media == m["counts"]["media"] == 10
    assert isinstance(m.counts, Mash)


def test_lists_of_mappings_are_converted():
    m = Mash({"data": [{"id": "1"}, {"id": "2", "tags": ["a"]}], "n": [1, 2]})
    assert [item.id for item in m.data] == ["1", "2"]
    assert m.data[1].tags == ["a"]
    assert m.n == [1, 2]


def test_missing_attribute_raises_attribute_error():
    m = Mash({"a": 1})
    with pytest.raises(AttributeError):
        m.b
    assert getattr(m, "b", None) is None


def test_dict_methods_win_over_keys():
    m = Mash({"items": [1]})
    assert callable(m.items)
    assert m["items"] == [1]


def test_attribute_assignment_converts_nested_values():
    m = Mash()
    m.user = {"id": "7"}
    assert m.user.id == "7"
    del m.user
    assert "user" not in m


def test_to_dict_round_trips_to_plain_types():
    source = {"a": {"b": [{"c": 1}]}}
    plain = Mash(source).to_dict()
    assert plain == source
    assert type(plain["a"]) is dict
    assert type(plain["a"]["b"][0]) is dict


def test_is_a_dict():
    m = Mash({"a": 1})
    assert isinstance(m, dict)
    assert m == {"a": 1}
    assert "a" in dir(m)
