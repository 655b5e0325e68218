"""Shared test fixtures for popo tests."""

import pytest

from popo.models import DataObject


class Article(DataObject):
    accessors = ("title", "first_name")


@pytest.fixture
def article_data():
    """Flat article data keyed by snake_case names."""
    return {"title": "Hello", "first_name": "Ada"}


@pytest.fixture
def data_object():
    """A generic DataObject holding a title."""
    return DataObject({"title": "Hello"})


@pytest.fixture
def article(article_data):
    """An Article with generated accessors."""
    return Article(article_data)
