"""
Question types for assessments.

Each question type has its own module:
- free_response: single expected answer string
- multiple_choices: ordered list of correct answer strings

Questions are created through a QuestionFactory, which validates the
arguments and records every created question in a QuestionRegistry,
partitioned by QuestionType.
"""

from enum import Enum


class QuestionType(str, Enum):
    """Supported question types, also used as registry category keys."""
    FREE_RESPONSE = "FREE_RESPONSE"
    MULTIPLE_CHOICES = "MULTIPLE_CHOICES"


FREE_RESPONSE = QuestionType.FREE_RESPONSE.value
MULTIPLE_CHOICES = QuestionType.MULTIPLE_CHOICES.value


# Import variants after QuestionType is defined (they import it from here)
from .base import Question, QuestionBase, validate_formulation
from .free_response import FreeResponseQuestion
from .multiple_choices import MultipleChoicesQuestion
from .registry import QuestionRegistry
from .factory import QUESTION_MAP, QuestionFactory, get_default_factory, get_instance

__all__ = [
    "FREE_RESPONSE",
    "MULTIPLE_CHOICES",
    "QUESTION_MAP",
    "FreeResponseQuestion",
    "MultipleChoicesQuestion",
    "Question",
    "QuestionBase",
    "QuestionFactory",
    "QuestionRegistry",
    "QuestionType",
    "get_default_factory",
    "get_instance",
    "validate_formulation",
]
