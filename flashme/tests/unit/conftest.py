"""Pytest configuration для unit тестов."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from flashme.core.enums import QuizGenerationStatus
from flashme.entities import Answer, Question, QuizGenerationTask, User
from flashme.providers.base import AnswerDraft, QuestionDraft


@pytest.fixture
def user() -> User:
    """Пользователь для тестов."""
    return User(id="user-1", email="user@example.com")


@pytest.fixture
def task() -> QuizGenerationTask:
    """Задача в статусе IN_PROGRESS."""
    return QuizGenerationTask(
        id="task-1",
        text_content="Photosynthesis converts light into chemical energy.",
        status=QuizGenerationStatus.IN_PROGRESS,
        user_id="user-1",
    )


@pytest.fixture
def drafts() -> list[QuestionDraft]:
    """Два черновика вопросов с ответами."""
    return [
        QuestionDraft(
            question="What does photosynthesis produce?",
            answers=[
                AnswerDraft(text="Glucose", is_correct=True),
                AnswerDraft(text="Salt", is_correct=False),
            ],
        ),
        QuestionDraft(
            question="Where does photosynthesis happen?",
            answers=[
                AnswerDraft(text="Chloroplasts", is_correct=True),
                AnswerDraft(text="Ribosomes", is_correct=False),
                AnswerDraft(text="Nucleus", is_correct=False),
            ],
        ),
    ]


@pytest.fixture
def make_question():
    """Фабрика вопросов с одним правильным ответом."""

    def _make(question_id: str, task_id: str = "task-1") -> Question:
        question = Question(id=question_id, content=f"Question {question_id}", quiz_generation_task_id=task_id)
        question.add_answer(Answer(id=f"{question_id}-a", content="Answer", is_correct=True, question_id=question_id))
        return question

    return _make


@pytest.fixture
def mock_generation_client(drafts: list[QuestionDraft]) -> MagicMock:
    """Mock GenerationClient, возвращающий drafts."""
    client = MagicMock()
    client.generate = AsyncMock(return_value=drafts)
    return client


@pytest.fixture
def mock_title_generator() -> MagicMock:
    """Mock TitleGenerator."""
    generator = MagicMock()
    generator.generate_title = AsyncMock(return_value="Photosynthesis")
    return generator


@pytest.fixture
def mock_task_repository() -> MagicMock:
    """Mock QuizGenerationTaskRepository."""
    repo = MagicMock()
    repo.save = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_by_user_id = AsyncMock(return_value=[])
    repo.find_by_user_id_paginated = AsyncMock()
    repo.find_by_user_id_and_statuses = AsyncMock(return_value=[])
    repo.soft_delete = AsyncMock()
    return repo


@pytest.fixture
def mock_question_repository() -> MagicMock:
    """Mock QuestionRepository."""
    repo = MagicMock()
    repo.save_questions = AsyncMock()
    repo.save = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_by_user_id = AsyncMock(return_value=[])
    repo.find_by_quiz_generation_task_id = AsyncMock(return_value=[])
    repo.soft_delete_by_task_id = AsyncMock()
    return repo


@pytest.fixture
def mock_answer_repository() -> MagicMock:
    """Mock AnswerRepository."""
    repo = MagicMock()
    repo.save_answers = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_by_question_id = AsyncMock(return_value=[])
    repo.soft_delete_by_question_id = AsyncMock()
    return repo


@pytest.fixture
def mock_user_repository(user: User) -> MagicMock:
    """Mock UserRepository, который находит пользователя."""
    repo = MagicMock()
    repo.find_by_id = AsyncMock(return_value=user)
    return repo


@pytest.fixture
def mock_user_answers_repository() -> MagicMock:
    """Mock UserAnswersRepository."""
    repo = MagicMock()
    repo.save = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_by_user_id = AsyncMock(return_value=[])
    return repo
