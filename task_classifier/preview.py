"""Task preview: classification plus due date, assignee and title."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from task_classifier.classifier import TitlePicker, classify
from task_classifier.config import Settings
from task_classifier.date_resolver import resolve_due_date
from task_classifier.schema import TaskPreview


def preview_task(
    description: str,
    now: Optional[datetime] = None,
    picker: Optional[TitlePicker] = None,
    settings: Optional[Settings] = None,
) -> TaskPreview:
    """Build the preview shown before a task is saved.

    The assignee is the first extracted person. When the category suggests no
    actions, the title falls back to the head of the description.
    """

    fallback_length = settings.title_fallback_length if settings else 100

    result = classify(description, now=now, picker=picker)
    due_date = resolve_due_date(result.extracted_entities.dates, now=now)
    people = result.extracted_entities.people

    return TaskPreview(
        title=result.title or description[:fallback_length],
        result=result,
        due_date=due_date,
        assigned_to=people[0] if people else None,
    )
