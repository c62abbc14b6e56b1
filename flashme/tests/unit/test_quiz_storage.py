"""Unit тесты для services/quiz/quiz_storage.py."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from flashme.entities import QuizGenerationTask
from flashme.services.quiz.quiz_storage import QuizStorageService
from flashme.shared.errors import StorageError


@pytest.fixture
def storage(
    mock_task_repository: MagicMock,
    mock_question_repository: MagicMock,
    mock_answer_repository: MagicMock,
) -> QuizStorageService:
    """QuizStorageService на mock репозиториях."""
    return QuizStorageService(mock_task_repository, mock_question_repository, mock_answer_repository)


class TestQuizStorageService:
    """Тесты для QuizStorageService."""

    @pytest.mark.asyncio
    async def test_save_task(
        self,
        storage: QuizStorageService,
        task: QuizGenerationTask,
        mock_task_repository: MagicMock,
    ) -> None:
        """Тест сохранения задачи."""
        await storage.save_task(task)

        mock_task_repository.save.assert_awaited_once_with(task)

    @pytest.mark.asyncio
    async def test_save_quiz_data_order_and_flattened_answers(
        self,
        storage: QuizStorageService,
        task: QuizGenerationTask,
        make_question,
        mock_task_repository: MagicMock,
        mock_question_repository: MagicMock,
        mock_answer_repository: MagicMock,
    ) -> None:
        """Тест: задача, затем вопросы, затем все ответы одним вызовом."""
        calls: list[str] = []
        mock_task_repository.save.side_effect = lambda *_: calls.append("task")
        mock_question_repository.save_questions.side_effect = lambda *_: calls.append("questions")
        mock_answer_repository.save_answers.side_effect = lambda *_: calls.append("answers")
        questions = [make_question("q-1"), make_question("q-2")]

        await storage.save_quiz_data(task, questions)

        assert calls == ["task", "questions", "answers"]
        mock_question_repository.save_questions.assert_awaited_once_with(questions)
        saved_answers = mock_answer_repository.save_answers.await_args.args[0]
        assert [a.id for a in saved_answers] == ["q-1-a", "q-2-a"]

    @pytest.mark.asyncio
    async def test_save_quiz_data_wraps_errors(
        self,
        storage: QuizStorageService,
        task: QuizGenerationTask,
        make_question,
        mock_question_repository: MagicMock,
        mock_answer_repository: MagicMock,
    ) -> None:
        """Тест: ошибка репозитория -> StorageError, без отката."""
        original = RuntimeError("db down")
        mock_question_repository.save_questions = AsyncMock(side_effect=original)

        with pytest.raises(StorageError) as exc_info:
            await storage.save_quiz_data(task, [make_question("q-1")])

        assert exc_info.value.original_error is original
        assert exc_info.value.__cause__ is original
        assert "db down" in exc_info.value.message
        mock_answer_repository.save_answers.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_save_failed_task_without_questions(
        self,
        storage: QuizStorageService,
        task: QuizGenerationTask,
        mock_task_repository: MagicMock,
        mock_question_repository: MagicMock,
    ) -> None:
        """Тест: вопросы не сохраняются, если их нет."""
        await storage.save_failed_task(task)

        mock_task_repository.save.assert_awaited_once_with(task)
        mock_question_repository.save_questions.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_save_failed_task_with_questions(
        self,
        storage: QuizStorageService,
        task: QuizGenerationTask,
        make_question,
        mock_question_repository: MagicMock,
    ) -> None:
        """Тест: накопленные вопросы сохраняются вместе с задачей."""
        task.add_question(make_question("q-1"))

        await storage.save_failed_task(task)

        mock_question_repository.save_questions.assert_awaited_once_with(task.questions)

    @pytest.mark.asyncio
    async def test_save_failed_task_does_not_wrap(
        self,
        storage: QuizStorageService,
        task: QuizGenerationTask,
        mock_task_repository: MagicMock,
    ) -> None:
        """Тест: ошибки save_failed_task не заворачиваются."""
        mock_task_repository.save = AsyncMock(side_effect=OSError("disk"))

        with pytest.raises(OSError):
            await storage.save_failed_task(task)
