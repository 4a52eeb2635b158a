"""
Multiple choices question.

A formulation with an ordered list of correct answers. The list is copied
into a tuple on construction, so the question never shares state with the
caller's list.
"""

from collections.abc import Sequence
from dataclasses import InitVar, dataclass

from loguru import logger

from assessment.errors import InvalidArgumentError

from . import QuestionType
from .base import QuestionBase


@dataclass(frozen=True, eq=False)
class MultipleChoicesQuestion(QuestionBase):
    """Question with one or more correct answer strings."""
    question_type = QuestionType.MULTIPLE_CHOICES

    answers: Sequence[str]
    validate_entries: InitVar[bool] = False

    def __post_init__(self, validate_entries: bool):
        super().__post_init__()
        if self.answers is None:
            logger.debug(f"Rejected multiple choices question {self.formulation!r}: no answers")
            raise InvalidArgumentError("The answer list cannot be None or empty!")
        if isinstance(self.answers, (str, bytes, bytearray)):
            raise TypeError(
                f"The answer list must be a sequence of str, not {type(self.answers).__name__}"
            )

        answers = tuple(self.answers)
        if not answers:
            logger.debug(f"Rejected multiple choices question {self.formulation!r}: no answers")
            raise InvalidArgumentError("The answer list cannot be None or empty!")

        for index, answer in enumerate(answers):
            if answer is not None and not isinstance(answer, str):
                raise TypeError(
                    f"The answer at position {index} must be a str, not {type(answer).__name__}"
                )
            if validate_entries and (answer is None or answer == ""):
                raise InvalidArgumentError(f"The answer at position {index} cannot be None or empty!")

        # Frozen dataclass: swap the caller's sequence for our own copy
        object.__setattr__(self, "answers", answers)

    def get_answer(self) -> tuple[str, ...]:
        return self.answers
