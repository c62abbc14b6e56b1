"""Unit тесты для repositories/memory.py."""

from datetime import datetime, timedelta, timezone

import pytest

from flashme.core.enums import QuizGenerationStatus
from flashme.entities import QuizGenerationTask, User, UserAnswer
from flashme.repositories import (
    AnswerRepository,
    InMemoryRepositories,
    QuestionRepository,
    QuizGenerationTaskRepository,
    UserAnswersRepository,
    UserRepository,
)
from flashme.repositories.base import PaginationParams


@pytest.fixture
def repos(user: User) -> InMemoryRepositories:
    """Пустые in-memory репозитории с одним пользователем."""
    repositories = InMemoryRepositories()
    repositories.users.add(user)
    return repositories


def _task(task_id: str, minutes_ago: int, user_id: str = "user-1", **kwargs) -> QuizGenerationTask:
    created = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc) - timedelta(minutes=minutes_ago)
    return QuizGenerationTask(id=task_id, user_id=user_id, created_at=created, **kwargs)


class TestInMemoryRepositories:
    """Тесты для набора in-memory репозиториев."""

    def test_protocols(self, repos: InMemoryRepositories) -> None:
        """Тест соответствия Protocol контрактам."""
        assert isinstance(repos.tasks, QuizGenerationTaskRepository)
        assert isinstance(repos.questions, QuestionRepository)
        assert isinstance(repos.answers, AnswerRepository)
        assert isinstance(repos.users, UserRepository)
        assert isinstance(repos.user_answers, UserAnswersRepository)

    @pytest.mark.asyncio
    async def test_reset(self, repos: InMemoryRepositories) -> None:
        """Тест очистки хранилища."""
        repos.reset()

        assert await repos.users.find_by_id("user-1") is None


class TestInMemoryQuizGenerationTaskRepository:
    """Тесты для InMemoryQuizGenerationTaskRepository."""

    @pytest.mark.asyncio
    async def test_snapshot_semantics(self, repos: InMemoryRepositories, task: QuizGenerationTask) -> None:
        """Тест: изменения после save не видны без повторного save."""
        await repos.tasks.save(task)

        task.update_status(QuizGenerationStatus.COMPLETED)
        stored = await repos.tasks.find_by_id(task.id)

        assert stored is not None
        assert stored is not task
        assert stored.status == QuizGenerationStatus.IN_PROGRESS

        await repos.tasks.save(task)
        stored = await repos.tasks.find_by_id(task.id)
        assert stored.status == QuizGenerationStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_find_by_user_id_newest_first(self, repos: InMemoryRepositories) -> None:
        """Тест: только задачи пользователя, новые первыми."""
        await repos.tasks.save(_task("old", 30))
        await repos.tasks.save(_task("new", 1))
        await repos.tasks.save(_task("foreign", 5, user_id="user-2"))

        tasks = await repos.tasks.find_by_user_id("user-1")

        assert [t.id for t in tasks] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_pagination(self, repos: InMemoryRepositories) -> None:
        """Тест страницы и метаданных пагинации."""
        for i in range(5):
            await repos.tasks.save(_task(f"task-{i}", i))

        result = await repos.tasks.find_by_user_id_paginated("user-1", PaginationParams(page=2, limit=2))

        assert [t.id for t in result.data] == ["task-2", "task-3"]
        assert result.meta.total == 5
        assert result.meta.total_pages == 3
        assert result.meta.page == 2

    @pytest.mark.asyncio
    async def test_pagination_empty(self, repos: InMemoryRepositories) -> None:
        """Тест пустой выборки."""
        result = await repos.tasks.find_by_user_id_paginated("user-1", PaginationParams())

        assert result.data == []
        assert result.meta.total == 0
        assert result.meta.total_pages == 0

    @pytest.mark.asyncio
    async def test_find_by_statuses(self, repos: InMemoryRepositories) -> None:
        """Тест фильтрации по статусам."""
        await repos.tasks.save(_task("running", 1, status=QuizGenerationStatus.IN_PROGRESS))
        await repos.tasks.save(_task("done", 2, status=QuizGenerationStatus.COMPLETED))
        await repos.tasks.save(_task("pending", 3))

        tasks = await repos.tasks.find_by_user_id_and_statuses(
            "user-1", [QuizGenerationStatus.PENDING, QuizGenerationStatus.IN_PROGRESS]
        )

        assert [t.id for t in tasks] == ["running", "pending"]

    @pytest.mark.asyncio
    async def test_soft_delete_hides_task(self, repos: InMemoryRepositories, task: QuizGenerationTask) -> None:
        """Тест: удалённая задача не видна в выборках, но доступна по ID."""
        await repos.tasks.save(task)

        await repos.tasks.soft_delete(task.id)

        assert await repos.tasks.find_by_user_id("user-1") == []
        stored = await repos.tasks.find_by_id(task.id)
        assert stored.is_deleted

    @pytest.mark.asyncio
    async def test_soft_delete_missing_is_noop(self, repos: InMemoryRepositories) -> None:
        """Тест: удаление несуществующей задачи не падает."""
        await repos.tasks.soft_delete("missing")

        assert await repos.tasks.find_by_id("missing") is None


class TestInMemoryQuestionAndAnswerRepositories:
    """Тесты для вопросов и вариантов ответа."""

    @pytest.mark.asyncio
    async def test_find_questions_by_user_through_tasks(
        self, repos: InMemoryRepositories, task: QuizGenerationTask, make_question
    ) -> None:
        """Тест: вопросы пользователя ищутся через его неудалённые задачи."""
        foreign_task = _task("task-2", 1, user_id="user-2")
        await repos.tasks.save(task)
        await repos.tasks.save(foreign_task)
        await repos.questions.save_questions([make_question("q-1"), make_question("q-2", task_id="task-2")])

        questions = await repos.questions.find_by_user_id("user-1")

        assert [q.id for q in questions] == ["q-1"]
        assert questions[0].answers[0].id == "q-1-a"

        await repos.tasks.soft_delete(task.id)
        assert await repos.questions.find_by_user_id("user-1") == []

    @pytest.mark.asyncio
    async def test_soft_delete_cascade(self, repos: InMemoryRepositories, make_question) -> None:
        """Тест мягкого удаления вопросов задачи и их ответов."""
        question = make_question("q-1")
        await repos.questions.save(question)
        await repos.answers.save_answers(question.answers)

        await repos.answers.soft_delete_by_question_id("q-1")
        await repos.questions.soft_delete_by_task_id("task-1")

        assert await repos.questions.find_by_quiz_generation_task_id("task-1") == []
        assert await repos.answers.find_by_question_id("q-1") == []
        deleted_answer = await repos.answers.find_by_id("q-1-a")
        assert deleted_answer.deleted_at is not None


class TestInMemoryUserAnswersRepository:
    """Тесты для InMemoryUserAnswersRepository."""

    @pytest.mark.asyncio
    async def test_find_by_user_id(self, repos: InMemoryRepositories, make_question) -> None:
        """Тест: история ответов только текущего пользователя."""
        question = make_question("q-1")
        mine = UserAnswer(user_id="user-1", question_id="q-1", answer=question.answers[0])
        other = UserAnswer(user_id="user-2", question_id="q-1", answer=question.answers[0])
        await repos.user_answers.save(mine)
        await repos.user_answers.save(other)

        history = await repos.user_answers.find_by_user_id("user-1")

        assert [a.id for a in history] == [mine.id]
        assert history[0].is_correct
        assert (await repos.user_answers.find_by_id(other.id)).user_id == "user-2"
