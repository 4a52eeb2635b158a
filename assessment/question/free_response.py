"""
Free response question.

A formulation with a single expected answer string.
"""

from dataclasses import dataclass

from loguru import logger

from assessment.errors import InvalidArgumentError

from . import QuestionType
from .base import QuestionBase


@dataclass(frozen=True, eq=False)
class FreeResponseQuestion(QuestionBase):
    """Question answered with one free-text string."""
    question_type = QuestionType.FREE_RESPONSE

    answer: str

    def __post_init__(self):
        super().__post_init__()
        if self.answer is None or self.answer == "":
            logger.debug(f"Rejected free response question {self.formulation!r}: empty answer")
            raise InvalidArgumentError("The answer cannot be None or empty!")
        if not isinstance(self.answer, str):
            raise TypeError(f"The answer must be a str, not {type(self.answer).__name__}")

    def get_answer(self) -> str:
        return self.answer
