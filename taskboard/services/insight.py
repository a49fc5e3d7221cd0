"""
Project insights: Gemini-backed summaries and answers with a local fallback.

Each operation has two decision points. An empty task list short-circuits
to a canned message; otherwise the configured API key decides between the
generation client and a deterministic report computed from the tasks.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence

from taskboard.config import GEMINI_BASE_URL, GEMINI_KEY_PLACEHOLDER
from taskboard.models.task import TaskStatus
from taskboard.schemas.insight import TaskSnapshot
from taskboard.services.llm_client import DEFAULT_MODEL, GeminiClient
from taskboard.services.prompts import build_ask_prompt, build_summarize_prompt

logger = logging.getLogger(__name__)

NO_TASKS_SUMMARY = "No tasks available to summarize."
NO_TASKS_ANSWER = "There are no tasks in this project yet."
DEMO_NOTICE = (
    "Note: This is a demo response. "
    "Add your GEMINI_API_KEY in .env to get AI-powered answers."
)
TOP_PRIORITY_LIMIT = 3


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


@dataclass(frozen=True, slots=True)
class StatusCounts:
    todo: int
    in_progress: int
    done: int

    @property
    def total(self) -> int:
        return self.todo + self.in_progress + self.done


def credential_available(api_key: Optional[str]) -> bool:
    """True when the key is set and is not the .env placeholder."""

    if not api_key or not api_key.strip():
        return False
    return api_key.strip() != GEMINI_KEY_PLACEHOLDER


def count_statuses(tasks: Sequence[TaskSnapshot]) -> StatusCounts:
    todo = sum(1 for t in tasks if t.status == TaskStatus.TODO)
    in_progress = sum(1 for t in tasks if t.status == TaskStatus.IN_PROGRESS)
    done = sum(1 for t in tasks if t.status == TaskStatus.DONE)
    return StatusCounts(todo=todo, in_progress=in_progress, done=done)


def progress_percent(done: int, total: int) -> int:
    """Whole percent of finished tasks, rounding halves up (12.5 -> 13)."""

    return (200 * done + total) // (2 * total)


def fallback_summary(tasks: Sequence[TaskSnapshot]) -> str:
    counts = count_statuses(tasks)
    total = len(tasks)
    top = [t.title for t in tasks if t.status == TaskStatus.TODO][:TOP_PRIORITY_LIMIT]
    top_lines = "\n".join(f"{i}. {title}" for i, title in enumerate(top, start=1))

    return (
        "Project Summary:\n"
        "\n"
        f"Total Tasks: {total}\n"
        f"- To Do: {counts.todo} tasks\n"
        f"- In Progress: {counts.in_progress} tasks\n"
        f"- Done: {counts.done} tasks\n"
        "\n"
        f"Progress: {progress_percent(counts.done, total)}% complete\n"
        "\n"
        "Top Priority Tasks:\n"
        f"{top_lines}"
    )


def fallback_answer(tasks: Sequence[TaskSnapshot], question: str) -> str:
    counts = count_statuses(tasks)
    total = len(tasks)
    q = (question or "").lower()

    answer = "Based on your project data:\n\n"
    if "how many" in q:
        answer += (
            f"Total: {total} tasks\n"
            f"- To Do: {counts.todo}\n"
            f"- In Progress: {counts.in_progress}\n"
            f"- Done: {counts.done}"
        )
    elif "progress" in q:
        answer += (
            f"Your project is {progress_percent(counts.done, total)}% complete "
            f"with {counts.done} out of {total} tasks finished."
        )
    else:
        answer += (
            f"I found {total} tasks in your project. {counts.todo} are pending, "
            f"{counts.in_progress} are in progress, and {counts.done} are completed."
        )
    return f"{answer}\n\n{DEMO_NOTICE}"


class InsightService:
    """Summaries and Q&A over a list of task snapshots."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        base_url: str = GEMINI_BASE_URL,
        client_factory: Optional[Callable[[str], TextGenerator]] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self._client_factory = client_factory or self._default_client

    @property
    def ai_enabled(self) -> bool:
        return credential_available(self.api_key)

    def _default_client(self, api_key: str) -> TextGenerator:
        return GeminiClient(api_key, model=self.model, base_url=self.base_url)

    def _client(self) -> TextGenerator:
        return self._client_factory(self.api_key.strip())

    async def summarize(self, tasks: Sequence[TaskSnapshot]) -> str:
        if not tasks:
            return NO_TASKS_SUMMARY
        if not self.ai_enabled:
            logger.info("Gemini key not configured, building local summary for %d tasks", len(tasks))
            return fallback_summary(tasks)

        logger.info("Requesting Gemini summary for %d tasks", len(tasks))
        return await self._client().generate(build_summarize_prompt(tasks))

    async def ask(self, tasks: Sequence[TaskSnapshot], question: str) -> str:
        if not tasks:
            return NO_TASKS_ANSWER
        if not self.ai_enabled:
            logger.info("Gemini key not configured, answering from task counts")
            return fallback_answer(tasks, question)

        logger.info("Asking Gemini about %d tasks", len(tasks))
        return await self._client().generate(build_ask_prompt(tasks, question))
