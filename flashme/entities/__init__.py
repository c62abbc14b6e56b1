"""Доменные сущности квизов."""

from flashme.entities.answer import Answer
from flashme.entities.question import Question
from flashme.entities.task import QuizGenerationTask
from flashme.entities.user import User
from flashme.entities.user_answer import UserAnswer

__all__ = [
    "Answer",
    "Question",
    "QuizGenerationTask",
    "User",
    "UserAnswer",
]
