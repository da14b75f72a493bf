"""JSON adapter for task descriptions."""

from __future__ import annotations

import json
import logging

from task_classifier.schema import TaskRecord

logger = logging.getLogger("task_classifier.adapters.json")


def _parse_item(item, index: int, max_description_length: int) -> TaskRecord:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    description = item.get("description")
    if not isinstance(description, str) or not description:
        raise ValueError(f"Item {index}: missing required field 'description'")
    if len(description) > max_description_length:
        raise ValueError(f"Item {index}: description exceeds {max_description_length} characters")

    task_id_raw = item.get("task_id")
    task_id = str(task_id_raw).strip() if task_id_raw not in (None, "") else str(index)
    return TaskRecord(task_id=task_id, description=description)


def parse(file_path: str, max_description_length: int = 5000) -> list[TaskRecord]:
    """Parse JSON file into task records."""

    with open(file_path, encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{file_path}: malformed JSON") from exc

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    records = [_parse_item(item, i, max_description_length) for i, item in enumerate(payload, start=1)]
    logger.info("Loaded %d task records from %s", len(records), file_path)
    return records
