"""
Question factory.

Builds questions, lets the question types validate their own arguments,
and records each successfully built question in a QuestionRegistry.
Nothing is registered when construction fails.

A process-wide default factory backs the module-level get_instance()
and QUESTION_MAP; code that needs isolation (tests, multiple quizzes)
creates its own QuestionFactory with its own registry.
"""

import threading
from collections.abc import Sequence

from loguru import logger

from config import get_settings
from assessment.errors import InvalidArgumentError

from .free_response import FreeResponseQuestion
from .multiple_choices import MultipleChoicesQuestion
from .registry import QuestionRegistry


class QuestionFactory:
    """Creates questions and registers them."""

    def __init__(
        self,
        registry: QuestionRegistry | None = None,
        validate_choice_entries: bool | None = None,
    ):
        self.registry = registry if registry is not None else QuestionRegistry()
        if validate_choice_entries is None:
            validate_choice_entries = get_settings().validate_choice_entries
        self.validate_choice_entries = validate_choice_entries
        logger.debug(f"QuestionFactory created (validate_choice_entries={validate_choice_entries})")

    def free_response(self, formulation: str, answer: str) -> FreeResponseQuestion:
        """Build and register a FreeResponseQuestion."""
        question = FreeResponseQuestion(formulation, answer)
        self.registry.register(question)
        return question

    def multiple_choices(self, formulation: str, answers: Sequence[str]) -> MultipleChoicesQuestion:
        """Build and register a MultipleChoicesQuestion."""
        question = MultipleChoicesQuestion(formulation, answers, self.validate_choice_entries)
        self.registry.register(question)
        return question

    def get_instance(
        self, formulation: str, answer: str | Sequence[str]
    ) -> FreeResponseQuestion | MultipleChoicesQuestion:
        """
        Build a question whose type follows from the answer.

        A single str gives a free response question; any other sequence of
        str gives a multiple choices question.

        Raises:
            InvalidArgumentError: formulation or answer is None or empty.
        """
        if answer is None:
            logger.debug(f"Rejected question {formulation!r}: answer is None")
            raise InvalidArgumentError("The answer cannot be None or empty!")
        if isinstance(answer, str):
            return self.free_response(formulation, answer)
        return self.multiple_choices(formulation, answer)


# Process-wide default, created on first use so settings are read lazily
_default_factory: QuestionFactory | None = None

# Default registry, shared by the default factory
QUESTION_MAP = QuestionRegistry()


_default_factory_lock = threading.Lock()


def get_default_factory() -> QuestionFactory:
    """Get the process-wide factory that registers into QUESTION_MAP."""
    global _default_factory
    if _default_factory is None:
        with _default_factory_lock:
            if _default_factory is None:
                _default_factory = QuestionFactory(QUESTION_MAP)
    return _default_factory


def get_instance(
    formulation: str, answer: str | Sequence[str]
) -> FreeResponseQuestion | MultipleChoicesQuestion:
    """Build a question with the default factory and record it in QUESTION_MAP."""
    return get_default_factory().get_instance(formulation, answer)
