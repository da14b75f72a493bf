"""Demo script for task-classifier."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_classifier.adapters.csv_adapter import parse
from task_classifier.metrics import compute_breakdown
from task_classifier.preview import preview_task


def main() -> None:
    records = parse("examples/sample_tasks.csv")
    previews = [preview_task(record.description) for record in records]
    for record, preview in zip(records, previews):
        print(record.task_id, preview.to_dict())
    print("Breakdown:", compute_breakdown(previews))


if __name__ == "__main__":
    main()
