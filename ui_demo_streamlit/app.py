"""Streamlit demo UI for task-classifier."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any

from task_classifier.adapters import csv_adapter, json_adapter
from task_classifier.config import Settings, get_settings
from task_classifier.metrics import compute_breakdown
from task_classifier.preview import preview_task


def _parse_records_from_path(file_path: str, settings: Settings) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path, settings.max_description_length)
    if suffix == ".json":
        return json_adapter.parse(file_path, settings.max_description_length)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file, settings: Settings) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    try:
        return _parse_records_from_path(temp_path, settings)
    finally:
        os.unlink(temp_path)


def run_engine(description: str, records: list, now: datetime, settings: Settings) -> dict[str, Any]:
    """Preview the typed description and the batch, returning a UI-friendly payload."""

    picker = settings.make_picker()
    single = preview_task(description, now=now, picker=picker, settings=settings)
    batch = [preview_task(record.description, now=now, picker=picker, settings=settings) for record in records]
    return {
        "preview": single.to_dict(),
        "batch": [{"task_id": record.task_id, **preview.to_dict()} for record, preview in zip(records, batch)],
        "breakdown": compute_breakdown(batch),
    }


def main() -> None:
    import streamlit as st

    settings = get_settings()

    st.set_page_config(page_title="Task Classifier Demo", layout="wide")
    st.title("Task Classifier — Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        description = st.text_area("Task description", value="Schedule a meeting with the team tomorrow at 2pm")
        reference_day = st.date_input("Reference date", value=datetime.now().date())
        uploaded = st.file_uploader("Upload task batch", type=["csv", "json"])
        use_demo = st.checkbox("Load demo tasks", value=True)
        run = st.button("Classify", type="primary")

    if not run:
        st.info("Type a description in the sidebar and click **Classify**.")
        return

    try:
        if uploaded is not None:
            records = _parse_uploaded(uploaded, settings)
        elif use_demo:
            records = _parse_records_from_path("examples/sample_tasks.csv", settings)
        else:
            records = []

        now = datetime.combine(reference_day, datetime.min.time())
        result = run_engine(description, records, now, settings)

        st.subheader("A) Preview")
        preview = result["preview"]
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Category", preview["category"])
        c2.metric("Priority", preview["priority"])
        c3.metric("Due date", preview["due_date"] or "—")
        c4.metric("Assigned to", preview["assigned_to"] or "—")
        st.write(f"**Title:** {preview['title']}")
        st.write("**Suggested actions:**", preview["suggested_actions"] or "None")
        st.json(preview["extracted_entities"])

        if records:
            st.subheader("B) Batch")
            st.table(
                [
                    {
                        "task_id": row["task_id"],
                        "category": row["category"],
                        "priority": row["priority"],
                        "due_date": row["due_date"],
                        "description": row["description"],
                    }
                    for row in result["batch"]
                ]
            )
            st.subheader("C) Breakdown")
            breakdown = result["breakdown"]
            b1, b2 = st.columns(2)
            b1.table([breakdown["by_category"]])
            b2.table([breakdown["by_priority"]])
            st.write(f"Due date found for {breakdown['due_date_rate'] * 100:.1f}% of tasks.")

    except ValueError as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()
