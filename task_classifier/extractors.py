"""Pattern-based entity extraction from raw task descriptions."""

from __future__ import annotations

import re

from task_classifier.keywords import ACTION_VERBS
from task_classifier.schema import ExtractedEntities

_MONTH = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*"
_WEEKDAY = r"(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)"

_DATE_PATTERN = re.compile(
    r"\b("
    r"today|tomorrow|tonight|this week|next week|this month|next month"
    r"|\d{1,2}/\d{1,2}/\d{2,4}"
    r"|\d{1,2}-\d{1,2}-\d{2,4}"
    rf"|{_MONTH}\s+\d{{1,2}}(?:st|nd|rd|th)?(?:,?\s+\d{{4}})?"
    rf"|{_WEEKDAY}"
    r"|at\s+\d{1,2}(?::\d{2})?\s*(?:am|pm)?"
    r"|\d{1,2}(?::\d{2})?\s*(?:am|pm)"
    r")\b",
    re.IGNORECASE | re.ASCII,
)

# Case-insensitive as a whole, so both name alternatives accept any letter case.
_PEOPLE_PATTERN = re.compile(
    r"\b(with|by|assign(?:\s+to)?|for|contact)\s+([A-Z][a-z]+(?:\s[A-Z][a-z]+)*|[a-z]+(?:\s[a-z]+)*)",
    re.IGNORECASE | re.ASCII,
)

_LOCATION_PATTERN = re.compile(r"\b(at|in)\s+([A-Z][a-z]+(?:\s[A-Z][a-z]+)*)", re.ASCII)


def _unique(values) -> list[str]:
    return list(dict.fromkeys(value for value in values if value))


def extract_dates(text: str) -> list[str]:
    """Return date and time expressions as written, without parsing them."""

    return _unique(match.group(0) for match in _DATE_PATTERN.finditer(text))


def extract_people(text: str) -> list[str]:
    return _unique(match.group(2) for match in _PEOPLE_PATTERN.finditer(text))


def extract_locations(text: str) -> list[str]:
    return _unique(match.group(2) for match in _LOCATION_PATTERN.finditer(text))


def extract_action_verbs(text: str) -> list[str]:
    """Return vocabulary verbs contained anywhere in ``text`` (substring match)."""

    lower = text.lower()
    return [verb for verb in ACTION_VERBS if verb in lower]


def extract_entities(text: str) -> ExtractedEntities:
    """Run every extractor over the original, non-normalized text."""

    return ExtractedEntities(
        dates=extract_dates(text),
        people=extract_people(text),
        locations=extract_locations(text),
        action_verbs=extract_action_verbs(text),
    )
