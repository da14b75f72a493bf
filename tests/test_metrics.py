from datetime import datetime

from task_classifier.metrics import compute_breakdown
from task_classifier.preview import preview_task

NOW = datetime(2024, 6, 12, 10, 30)


def test_compute_breakdown_counts():
    previews = [
        preview_task(text, now=NOW)
        for text in (
            "Schedule a meeting with the team tomorrow",
            "Fix the bug urgently",
            "Update the project documentation",
            "Pay the invoice for Acme by Friday",
        )
    ]
    breakdown = compute_breakdown(previews)
    assert breakdown["total_tasks"] == 4
    assert breakdown["by_category"] == {
        "scheduling": 1,
        "finance": 1,
        "technical": 1,
        "safety": 0,
        "general": 1,
    }
    assert breakdown["by_priority"] == {"high": 1, "medium": 0, "low": 3}
    assert breakdown["with_due_date"] == 2
    assert breakdown["with_assignee"] == 2
    assert breakdown["due_date_rate"] == 0.5


def test_compute_breakdown_empty():
    breakdown = compute_breakdown([])
    assert breakdown["total_tasks"] == 0
    assert breakdown["due_date_rate"] == 0.0
    assert breakdown["by_category"]["general"] == 0
