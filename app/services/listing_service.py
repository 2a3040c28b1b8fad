"""
Listing service: search and category filtering for the article list.

Pure and order-preserving: matches keep their input order, and the
input collection is never modified.  The text match is a plain
``str.lower()`` substring test against title and excerpt.
"""
from typing import Iterable, Protocol

from app.models import Category

ALL_CATEGORIES = "All"

CATEGORY_CHOICES: list[str] = [ALL_CATEGORIES, *(c.value for c in Category)]


class Listable(Protocol):
    title: str
    excerpt: str
    category: Category


def matches(article: Listable, search_term: str, category: str) -> bool:
    if category != ALL_CATEGORIES and article.category != category:
        return False
    if not search_term:
        return True
    needle = search_term.lower()
    return needle in article.title.lower() or needle in article.excerpt.lower()


def filter_articles(articles: Iterable[Listable], search_term: str, category: str) -> list:
    """
    Return the articles in *articles* that match *search_term* and *category*.

    *category* is either ``"All"`` or one of the Category values.
    """
    return [a for a in articles if matches(a, search_term, category)]
