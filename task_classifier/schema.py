"""Core data schema for task classification."""

from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Topical category of a task; declaration order is detection order."""

    SCHEDULING = "scheduling"
    FINANCE = "finance"
    TECHNICAL = "technical"
    SAFETY = "safety"
    GENERAL = "general"


class Priority(str, Enum):
    """Urgency of a task; declaration order is detection order."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass
class ExtractedEntities:
    """Entities found in a task description."""

    dates: list[str] = field(default_factory=list)
    people: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    action_verbs: list[str] = field(default_factory=list)


@dataclass
class ClassificationResult:
    """Structured attributes derived from one description."""

    description: str
    category: Category
    priority: Priority
    extracted_entities: ExtractedEntities
    suggested_actions: list[str]
    title: Optional[str] = None

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["category"] = self.category.value
        payload["priority"] = self.priority.value
        return payload


@dataclass
class TaskRecord:
    """A task description loaded from a batch file."""

    task_id: str
    description: str


@dataclass
class TaskPreview:
    """Classification enriched with due date, assignee and a guaranteed title."""

    title: str
    result: ClassificationResult
    due_date: Optional[date]
    assigned_to: Optional[str]

    def to_dict(self) -> dict:
        payload = self.result.to_dict()
        payload["title"] = self.title
        payload["due_date"] = self.due_date.isoformat() if self.due_date else None
        payload["assigned_to"] = self.assigned_to
        return payload
