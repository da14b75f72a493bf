"""Keyword-based category and priority detection."""

from __future__ import annotations

from task_classifier.keywords import CATEGORY_KEYWORDS, PRIORITY_KEYWORDS
from task_classifier.schema import Category, Priority


def detect_category(text: str) -> Category:
    """Return the first category, in declaration order, with a keyword contained in ``text``.

    ``text`` is expected to be lowercased already.
    """

    for category in Category:
        if any(keyword in text for keyword in CATEGORY_KEYWORDS[category]):
            return category
    return Category.GENERAL


def detect_priority(text: str) -> Priority:
    """Return the first priority, in declaration order, with a keyword contained in ``text``."""

    for priority in Priority:
        if any(keyword in text for keyword in PRIORITY_KEYWORDS[priority]):
            return priority
    return Priority.LOW
