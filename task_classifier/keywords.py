"""Static keyword and suggested-action tables."""

from __future__ import annotations

from types import MappingProxyType

from task_classifier.schema import Category, Priority

CATEGORY_KEYWORDS = MappingProxyType(
    {
        Category.SCHEDULING: ("meeting", "schedule", "call", "appointment", "deadline"),
        Category.FINANCE: ("payment", "invoice", "bill", "budget", "cost", "expense"),
        Category.TECHNICAL: ("bug", "fix", "error", "install", "repair", "maintain"),
        Category.SAFETY: ("safety", "hazard", "inspection", "compliance", "ppe"),
        Category.GENERAL: (),
    }
)

PRIORITY_KEYWORDS = MappingProxyType(
    {
        Priority.HIGH: ("urgent", "asap", "immediately", "today", "critical", "emergency"),
        Priority.MEDIUM: ("soon", "this week", "important"),
        Priority.LOW: (),
    }
)

SUGGESTED_ACTIONS = MappingProxyType(
    {
        Category.SCHEDULING: ("Block calendar", "Send invite", "Prepare agenda", "Set reminder"),
        Category.FINANCE: ("Check budget", "Get approval", "Generate invoice", "Update records"),
        Category.TECHNICAL: ("Diagnose issue", "Check resources", "Assign technician", "Document fix"),
        Category.SAFETY: ("Conduct inspection", "File report", "Notify supervisor", "Update checklist"),
        Category.GENERAL: (),
    }
)

ACTION_VERBS = ("schedule", "call", "meet", "review", "prepare", "submit", "fix", "inspect", "install")
