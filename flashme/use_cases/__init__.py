"""Сценарии (use cases) квизов."""

from flashme.use_cases.create_quiz_generation_task import (
    CreateQuizGenerationTaskResult,
    CreateQuizGenerationTaskUseCase,
)
from flashme.use_cases.questions import (
    FetchQuestionsForUserUseCase,
    UserAddsQuestionUseCase,
    UserAnswersQuestionUseCase,
    UserEditsAnswerUseCase,
    UserEditsQuestionUseCase,
)
from flashme.use_cases.quiz_generation_tasks import (
    FetchOngoingQuizGenerationTasksUseCase,
    FetchQuizGenerationTaskForUserUseCase,
    FetchQuizGenerationTasksForUserUseCase,
    SoftDeleteQuizGenerationTaskForUserUseCase,
)

__all__ = [
    "CreateQuizGenerationTaskResult",
    "CreateQuizGenerationTaskUseCase",
    "FetchOngoingQuizGenerationTasksUseCase",
    "FetchQuestionsForUserUseCase",
    "FetchQuizGenerationTaskForUserUseCase",
    "FetchQuizGenerationTasksForUserUseCase",
    "SoftDeleteQuizGenerationTaskForUserUseCase",
    "UserAddsQuestionUseCase",
    "UserAnswersQuestionUseCase",
    "UserEditsAnswerUseCase",
    "UserEditsQuestionUseCase",
]
