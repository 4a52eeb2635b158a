"""
Question registry.

Tracks every question created by a factory, partitioned by QuestionType
and kept in creation order. Both categories exist from construction and
are never removed; sequences only grow (or are emptied by clear()).
"""

import threading

from loguru import logger

from assessment.errors import InvalidArgumentError

from . import QuestionType
from .base import QuestionBase


class QuestionRegistry:
    """Ordered, per-type record of created questions. Safe for concurrent register()."""

    def __init__(self):
        self._lock = threading.Lock()
        self._questions: dict[QuestionType, list[QuestionBase]] = {
            question_type: [] for question_type in QuestionType
        }

    @staticmethod
    def _category(category: str | QuestionType) -> QuestionType:
        try:
            return QuestionType(category)
        except ValueError:
            raise InvalidArgumentError(f"Unknown question category: {category!r}") from None

    def register(self, question: QuestionBase) -> QuestionBase:
        """Append a question under its own type and return it."""
        category = self._category(question.question_type)
        with self._lock:
            self._questions[category].append(question)
            position = len(self._questions[category])
        logger.debug(f"Registered {category.value} question #{position}: {question.formulation!r}")
        return question

    def get(self, category: str | QuestionType) -> tuple[QuestionBase, ...]:
        """Snapshot of the questions registered under one category."""
        category = self._category(category)
        with self._lock:
            return tuple(self._questions[category])

    def count(self, category: str | QuestionType) -> int:
        category = self._category(category)
        with self._lock:
            return len(self._questions[category])

    def as_dict(self) -> dict[str, tuple[QuestionBase, ...]]:
        """Snapshot of the whole registry keyed by category name."""
        with self._lock:
            return {
                question_type.value: tuple(questions)
                for question_type, questions in self._questions.items()
            }

    def clear(self) -> None:
        """Empty every category (the categories themselves stay)."""
        with self._lock:
            for questions in self._questions.values():
                questions.clear()

    def __getitem__(self, category: str | QuestionType) -> tuple[QuestionBase, ...]:
        return self.get(category)

    def __len__(self) -> int:
        with self._lock:
            return sum(len(questions) for questions in self._questions.values())

    def __repr__(self) -> str:
        counts = ", ".join(f"{key}={len(value)}" for key, value in self.as_dict().items())
        return f"QuestionRegistry({counts})"
