"""Popo data object models.

Example:
    from popo.models import DataObject, define

    Article = define("Article", ["title", "first_name"])
    article = Article({"title": "Hello"})
    article.getTitle()
    article.setFirstName("Ada")
"""

from ..naming import Resolution
from .DataObject import DataObject, define

__all__ = [
    "DataObject",
    "Resolution",
    "define",
]
