"""CSV adapter for task descriptions."""

from __future__ import annotations

import csv
import logging

from task_classifier.schema import TaskRecord

logger = logging.getLogger("task_classifier.adapters.csv")


def _parse_row(row: dict, row_number: int, max_description_length: int) -> TaskRecord:
    description = row.get("description") or ""
    if not description:
        raise ValueError(f"Row {row_number}: missing required field 'description'")
    if len(description) > max_description_length:
        raise ValueError(f"Row {row_number}: description exceeds {max_description_length} characters")

    task_id = (row.get("task_id") or "").strip() or str(row_number - 1)
    return TaskRecord(task_id=task_id, description=description)


def parse(file_path: str, max_description_length: int = 5000) -> list[TaskRecord]:
    """Parse CSV file into task records; ``task_id`` defaults to the data row position."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        records: list[TaskRecord] = []
        for row_number, row in enumerate(reader, start=2):
            records.append(_parse_row(row, row_number, max_description_length))

    logger.info("Loaded %d task records from %s", len(records), file_path)
    return records
