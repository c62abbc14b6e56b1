"""Сервисы пайплайна генерации квизов."""

from flashme.services.quiz.background import BackgroundTaskRunner
from flashme.services.quiz.question_selector import QuestionSelector, count_question_frequencies
from flashme.services.quiz.quiz_generator import QuizGenerationResult, QuizGenerator
from flashme.services.quiz.quiz_processor import QuizProcessor
from flashme.services.quiz.quiz_storage import QuizStorageService

__all__ = [
    "BackgroundTaskRunner",
    "QuestionSelector",
    "QuizGenerationResult",
    "QuizGenerator",
    "QuizProcessor",
    "QuizStorageService",
    "count_question_frequencies",
]
