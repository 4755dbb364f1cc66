"""
Models package initialization
Import all models here to ensure they are registered with SQLAlchemy
"""

from igloo.models.content import Test, QuestionType
from igloo.models.submission import Submission

__all__ = [
    "Test",
    "QuestionType",
    "Submission",
]
