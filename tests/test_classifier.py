import random
from datetime import datetime

from task_classifier.classifier import classify
from task_classifier.schema import Category, Priority

NOW = datetime(2024, 6, 12, 10, 30)


class FixedPicker:
    def __init__(self, index: int):
        self.index = index

    def choice(self, seq):
        return seq[self.index]


def test_scheduling_scenario():
    result = classify("Schedule a meeting with the team tomorrow at 2pm", now=NOW, picker=FixedPicker(1))
    assert result.category == Category.SCHEDULING
    assert "tomorrow" in result.extracted_entities.dates
    assert "at 2pm" in result.extracted_entities.dates
    assert "schedule" in result.extracted_entities.action_verbs
    assert result.suggested_actions == ["Block calendar", "Send invite", "Prepare agenda", "Set reminder"]
    assert result.title == "Send invite"


def test_technical_scenario():
    result = classify("Fix the bug in the login system urgently", now=NOW)
    assert result.category == Category.TECHNICAL
    assert result.priority == Priority.HIGH
    assert "fix" in result.extracted_entities.action_verbs
    assert result.title in result.suggested_actions


def test_general_scenario_has_no_actions_or_title():
    result = classify("Update the project documentation", now=NOW)
    assert result.category == Category.GENERAL
    assert result.priority == Priority.LOW
    assert result.suggested_actions == []
    assert result.title is None


def test_empty_description():
    result = classify("")
    assert result.description == ""
    assert result.category == Category.GENERAL
    assert result.priority == Priority.LOW
    assert result.extracted_entities.dates == []
    assert result.extracted_entities.people == []
    assert result.title is None


def test_case_and_whitespace_insensitive_detection():
    for text in ("URGENT MEETING SCHEDULE", "urgent meeting schedule", "   Urgent Meeting Schedule   "):
        result = classify(text)
        assert result.category == Category.SCHEDULING
        assert result.priority == Priority.HIGH


def test_description_kept_verbatim():
    text = "   Schedule    meeting   tomorrow   "
    result = classify(text)
    assert result.description == text
    assert "tomorrow" in result.extracted_entities.dates


def test_results_stay_within_enumerations():
    texts = [
        "Process invoice payment for vendor by Friday",
        "Safety inspection at Warehouse next week",
        "Need this done ASAP",
        "???",
        "12/25/2024",
    ]
    for text in texts:
        result = classify(text)
        assert result.category in Category
        assert result.priority in Priority


def test_classify_is_idempotent_apart_from_title():
    text = "Review the Q3 budget with Sarah on 12/15/2025 at Head Office"
    first = classify(text, now=NOW)
    second = classify(text, now=NOW)
    assert first.category == second.category
    assert first.priority == second.priority
    assert first.extracted_entities == second.extracted_entities


def test_seeded_picker_is_reproducible():
    text = "Repair the conveyor belt"
    first = classify(text, picker=random.Random(3))
    second = classify(text, picker=random.Random(3))
    assert first.title == second.title


def test_suggested_actions_are_a_fresh_list():
    result = classify("Pay the electricity bill")
    result.suggested_actions.append("Mutated")
    assert classify("Pay the electricity bill").suggested_actions == [
        "Check budget",
        "Get approval",
        "Generate invoice",
        "Update records",
    ]


def test_to_dict_is_plain_document():
    payload = classify("Fix the bug in the login system urgently", picker=FixedPicker(0)).to_dict()
    assert payload["category"] == "technical"
    assert payload["priority"] == "high"
    assert payload["title"] == "Diagnose issue"
    assert set(payload["extracted_entities"]) == {"dates", "people", "locations", "action_verbs"}
