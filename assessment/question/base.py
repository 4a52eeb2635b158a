"""
Base protocol and shared types for questions.
"""

from dataclasses import dataclass
from typing import ClassVar, Protocol, runtime_checkable

from loguru import logger

from assessment.errors import InvalidArgumentError

from . import QuestionType


@runtime_checkable
class Question(Protocol):
    """Anything that exposes a question formulation."""

    @property
    def formulation(self) -> str:
        ...

    def get_formulation(self) -> str:
        """Return the question text."""
        ...


def validate_formulation(formulation: str | None) -> str:
    """
    Check a formulation and return it unchanged.

    Raises InvalidArgumentError if the formulation is None or empty.
    Whitespace-only text is accepted.
    """
    if formulation is None or formulation == "":
        logger.debug("Rejected question with empty formulation")
        raise InvalidArgumentError("The formulation cannot be None or empty!")
    if not isinstance(formulation, str):
        raise TypeError(f"The formulation must be a str, not {type(formulation).__name__}")
    return formulation


@dataclass(frozen=True, eq=False)
class QuestionBase:
    """
    Shared storage, equality and hashing for concrete question types.

    Two questions are equal when they are of the same type and have the
    same formulation (exact, case-sensitive). Answers are not compared.
    """
    question_type: ClassVar[QuestionType]

    formulation: str

    def __post_init__(self):
        validate_formulation(self.formulation)

    def get_formulation(self) -> str:
        return self.formulation

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, QuestionBase):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.question_type is other.question_type
            and self.formulation == other.formulation
        )

    def __hash__(self) -> int:
        return hash(self.formulation)
