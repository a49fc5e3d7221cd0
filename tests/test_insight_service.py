"""Tests for the insight service decision paths and local fallback."""

from __future__ import annotations

import asyncio

import pytest

from taskboard.errors import GenerationError
from taskboard.models.task import TaskStatus
from taskboard.schemas.insight import TaskSnapshot
from taskboard.services.insight import (
    DEMO_NOTICE,
    NO_TASKS_ANSWER,
    NO_TASKS_SUMMARY,
    InsightService,
    count_statuses,
    credential_available,
    fallback_answer,
    fallback_summary,
    progress_percent,
)
from taskboard.services.prompts import build_ask_prompt, build_summarize_prompt


def _task(title: str, status: TaskStatus) -> TaskSnapshot:
    return TaskSnapshot(title=title, status=status)


@pytest.mark.parametrize(
    "key, expected",
    [
        (None, False),
        ("", False),
        ("   ", False),
        ("your_gemini_api_key_here", False),
        ("AIza-real-key", True),
    ],
)
def test_credential_available(key, expected) -> None:
    assert credential_available(key) is expected


@pytest.mark.parametrize(
    "done, total, expected",
    [(0, 5, 0), (5, 5, 100), (1, 3, 33), (2, 3, 67), (1, 8, 13), (1, 200, 1), (3, 8, 38)],
)
def test_progress_percent_rounds_half_up(done, total, expected) -> None:
    assert progress_percent(done, total) == expected


@pytest.mark.parametrize("key", [None, "your_gemini_api_key_here", "AIza-real-key"])
def test_empty_lists_short_circuit_regardless_of_key(key, fake_generator) -> None:
    service = InsightService(key, client_factory=fake_generator)
    assert asyncio.run(service.summarize([])) == NO_TASKS_SUMMARY
    assert asyncio.run(service.ask([], "How many tasks are done?")) == NO_TASKS_ANSWER
    assert fake_generator.prompts == []


def test_counts_sum_to_total(sample_tasks) -> None:
    counts = count_statuses(sample_tasks)
    assert (counts.todo, counts.in_progress, counts.done) == (5, 2, 1)
    assert counts.total == len(sample_tasks)


def test_fallback_summary_report(sample_tasks) -> None:
    summary = fallback_summary(sample_tasks)
    assert summary == (
        "Project Summary:\n"
        "\n"
        "Total Tasks: 8\n"
        "- To Do: 5 tasks\n"
        "- In Progress: 2 tasks\n"
        "- Done: 1 tasks\n"
        "\n"
        "Progress: 13% complete\n"
        "\n"
        "Top Priority Tasks:\n"
        "1. Write docs\n"
        "2. Design logo\n"
        "3. Set up CI"
    )


def test_fallback_summary_without_todo_tasks() -> None:
    tasks = [_task("Fix bug", TaskStatus.IN_PROGRESS), _task("Ship", TaskStatus.DONE)]
    summary = fallback_summary(tasks)
    assert "Progress: 50% complete" in summary
    assert summary.endswith("Top Priority Tasks:\n")


def test_fallback_summary_keeps_todo_order() -> None:
    tasks = [
        _task("b", TaskStatus.DONE),
        _task("z", TaskStatus.TODO),
        _task("a", TaskStatus.TODO),
    ]
    assert fallback_summary(tasks).endswith("Top Priority Tasks:\n1. z\n2. a")


def test_fallback_answer_counts_branch(sample_tasks) -> None:
    answer = fallback_answer(sample_tasks, "How many tasks are done?")
    assert answer.startswith("Based on your project data:\n\nTotal: 8 tasks\n")
    assert "- To Do: 5\n- In Progress: 2\n- Done: 1" in answer
    assert answer.endswith(DEMO_NOTICE)


def test_fallback_answer_progress_branch(sample_tasks) -> None:
    answer = fallback_answer(sample_tasks, "What's our PROGRESS?")
    assert "Your project is 13% complete with 1 out of 8 tasks finished." in answer
    assert answer.endswith(DEMO_NOTICE)


def test_fallback_answer_how_many_wins_over_progress(sample_tasks) -> None:
    answer = fallback_answer(sample_tasks, "How many tasks show progress?")
    assert "Total: 8 tasks" in answer
    assert "% complete" not in answer


def test_fallback_answer_generic_branch(sample_tasks) -> None:
    answer = fallback_answer(sample_tasks, "What's next?")
    assert (
        "I found 8 tasks in your project. 5 are pending, 2 are in progress, and 1 are completed."
        in answer
    )
    assert answer.endswith(DEMO_NOTICE)


def test_fallback_is_idempotent(sample_tasks) -> None:
    service = InsightService("your_gemini_api_key_here")
    first = asyncio.run(service.summarize(sample_tasks))
    second = asyncio.run(service.summarize(sample_tasks))
    assert first == second == fallback_summary(sample_tasks)
    assert asyncio.run(service.ask(sample_tasks, "What's next?")) == asyncio.run(
        service.ask(sample_tasks, "What's next?")
    )


def test_summarize_uses_generator_when_key_present(sample_tasks, fake_generator) -> None:
    service = InsightService(" AIza-real-key ", client_factory=fake_generator)
    summary = asyncio.run(service.summarize(sample_tasks))
    assert summary == "Generated insight"
    assert fake_generator.prompts == [build_summarize_prompt(sample_tasks)]
    assert fake_generator.keys == ["AIza-real-key"]


def test_ask_uses_generator_when_key_present(sample_tasks, fake_generator) -> None:
    service = InsightService("AIza-real-key", client_factory=fake_generator)
    answer = asyncio.run(service.ask(sample_tasks, "How many tasks are done?"))
    assert answer == "Generated insight"
    assert DEMO_NOTICE not in answer
    assert fake_generator.prompts == [build_ask_prompt(sample_tasks, "How many tasks are done?")]


def test_generation_failure_propagates(sample_tasks, failing_generator) -> None:
    service = InsightService("AIza-real-key", client_factory=failing_generator)
    with pytest.raises(GenerationError, match="connection reset"):
        asyncio.run(service.summarize(sample_tasks))
    with pytest.raises(GenerationError):
        asyncio.run(service.ask(sample_tasks, "What's next?"))
