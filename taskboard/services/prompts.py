"""Prompt builders for the project insight features."""
from __future__ import annotations

from typing import Sequence

from taskboard.schemas.insight import TaskSnapshot


def _status_label(status) -> str:
    return str(getattr(status, "value", status)).upper()


def render_task_list(tasks: Sequence[TaskSnapshot]) -> str:
    """Render tasks as numbered ``[STATUS] title: description`` lines."""

    return "\n".join(
        f"{i}. [{_status_label(task.status)}] {task.title}: {task.description or 'No description'}"
        for i, task in enumerate(tasks, start=1)
    )


def build_summarize_prompt(tasks: Sequence[TaskSnapshot]) -> str:
    task_list = render_task_list(tasks)
    return (
        "You are a project management assistant. "
        "Analyze the following tasks and provide a comprehensive summary.\n"
        "\n"
        "Tasks:\n"
        f"{task_list}\n"
        "\n"
        "Please provide:\n"
        "1. Overall project progress and status\n"
        "2. Key achievements (completed tasks)\n"
        "3. Current focus areas (in-progress tasks)\n"
        "Keep the summary concise but insightful."
    )


def build_ask_prompt(tasks: Sequence[TaskSnapshot], question: str) -> str:
    task_list = render_task_list(tasks)
    return (
        "You are a project management assistant. Here are the current project tasks:\n"
        "\n"
        f"{task_list}\n"
        "\n"
        f"User Question: {question}\n"
        "\n"
        "Please provide a helpful, accurate answer based on the task data above. "
        "Be specific and reference actual tasks when relevant."
    )
