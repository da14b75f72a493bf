"""Aggregate breakdown of a batch of task previews."""

from __future__ import annotations

from collections import Counter

from task_classifier.schema import Category, Priority, TaskPreview


def compute_breakdown(previews: list[TaskPreview]) -> dict:
    """Count previews per category and priority plus due-date and assignee coverage."""

    by_category = Counter(preview.result.category for preview in previews)
    by_priority = Counter(preview.result.priority for preview in previews)
    with_due_date = sum(1 for preview in previews if preview.due_date is not None)
    with_assignee = sum(1 for preview in previews if preview.assigned_to)

    return {
        "total_tasks": len(previews),
        "by_category": {category.value: by_category[category] for category in Category},
        "by_priority": {priority.value: by_priority[priority] for priority in Priority},
        "with_due_date": with_due_date,
        "with_assignee": with_assignee,
        "due_date_rate": with_due_date / len(previews) if previews else 0.0,
    }
