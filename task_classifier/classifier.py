"""Task classification orchestrator."""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Optional, Protocol, Sequence, TypeVar

from task_classifier.detectors import detect_category, detect_priority
from task_classifier.extractors import extract_entities
from task_classifier.keywords import SUGGESTED_ACTIONS
from task_classifier.schema import ClassificationResult

logger = logging.getLogger("task_classifier.classifier")

T = TypeVar("T")


class TitlePicker(Protocol):
    """Source of the random title pick; ``random.Random`` satisfies it."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


def _normalize(text: str) -> str:
    return text.lower().strip()


def classify(
    description: str,
    now: Optional[datetime] = None,
    picker: Optional[TitlePicker] = None,
) -> ClassificationResult:
    """Classify a free-text task description.

    ``now`` is accepted so callers can pin the moment alongside
    ``resolve_due_date``; classification itself does not depend on it. The
    title is one of the suggested actions picked by ``picker`` and is ``None``
    for the general category.
    """

    normalized = _normalize(description)
    category = detect_category(normalized)
    priority = detect_priority(normalized)
    entities = extract_entities(description)
    suggested_actions = list(SUGGESTED_ACTIONS[category])

    title = (picker or random).choice(suggested_actions) if suggested_actions else None

    logger.debug(
        "Classified %d chars as %s/%s with %d date expressions",
        len(description),
        category.value,
        priority.value,
        len(entities.dates),
    )
    return ClassificationResult(
        description=description,
        category=category,
        priority=priority,
        extracted_entities=entities,
        suggested_actions=suggested_actions,
        title=title,
    )
