"""Tests for collection helpers."""

from collections import OrderedDict

import pytest

from popo.models import DataObject
from popo.utils.collection import to_array


class TestToArray:
    def test_data_object(self, article):
        result = to_array(article)

        assert result == {"title": "Hello", "first_name": "Ada"}
        assert list(result) == ["title", "first_name"]

    def test_snapshot_is_detached(self, data_object):
        result = to_array(data_object)
        result["title"] = "World"

        assert data_object.dispatch("getTitle") == "Hello"

    def test_mapping(self):
        assert to_array(OrderedDict([("b", 1), ("a", 2)])) == {"b": 1, "a": 2}

    def test_to_dict_object(self):
        class Record:
            def to_dict(self):
                return {"id": 1}

        assert to_array(Record()) == {"id": 1}

    def test_empty_data_object(self):
        assert to_array(DataObject()) == {}

    def test_unsupported(self):
        with pytest.raises(TypeError, match="Cannot convert int"):
            to_array(5)
