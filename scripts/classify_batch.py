"""Classify a CSV/JSON batch of task descriptions."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_classifier.adapters import csv_adapter, json_adapter
from task_classifier.config import get_settings
from task_classifier.metrics import compute_breakdown
from task_classifier.preview import preview_task


def _load_records(path: Path, max_description_length: int):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path), max_description_length)
    if suffix == ".json":
        return json_adapter.parse(str(path), max_description_length)
    raise ValueError("Unsupported input format, expected .csv or .json")


def main() -> None:
    parser = argparse.ArgumentParser(description="Classify task descriptions in bulk")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON task file")
    parser.add_argument("--seed", type=int, default=None, help="Seed for title selection")
    args = parser.parse_args()

    settings = get_settings()
    if args.seed is not None:
        settings.title_seed = args.seed
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    records = _load_records(Path(args.data), settings.max_description_length)
    picker = settings.make_picker()
    previews = [preview_task(record.description, picker=picker, settings=settings) for record in records]

    report = {
        "tasks": [{"task_id": record.task_id, **preview.to_dict()} for record, preview in zip(records, previews)],
        "breakdown": compute_breakdown(previews),
    }

    print(json.dumps(report, indent=2))

    outputs_dir = settings.output_dir
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "classification_report.json"
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Saved classification report to {out_path}")


if __name__ == "__main__":
    main()
