"""
Assessment question model.

Free response and multiple choices questions, built through a validating
factory that records every created question by type.
"""

from assessment.errors import InvalidArgumentError
from assessment.question import (
    FREE_RESPONSE,
    MULTIPLE_CHOICES,
    QUESTION_MAP,
    FreeResponseQuestion,
    MultipleChoicesQuestion,
    Question,
    QuestionFactory,
    QuestionRegistry,
    QuestionType,
    get_instance,
)

__version__ = "1.0.0"

__all__ = [
    "FREE_RESPONSE",
    "MULTIPLE_CHOICES",
    "QUESTION_MAP",
    "FreeResponseQuestion",
    "InvalidArgumentError",
    "MultipleChoicesQuestion",
    "Question",
    "QuestionFactory",
    "QuestionRegistry",
    "QuestionType",
    "get_instance",
]
