"""flashme - Dependencies.

Сборка сервисов и сценариев квизов из репозиториев и клиента генерации.
"""

from dataclasses import dataclass

from flashme.core.config import Settings, settings
from flashme.providers.base import GenerationClient, TitleGenerator
from flashme.providers.factory import create_generation_client, create_title_generator
from flashme.repositories.base import Repositories
from flashme.services.quiz import (
    BackgroundTaskRunner,
    QuestionSelector,
    QuizGenerator,
    QuizProcessor,
    QuizStorageService,
)
from flashme.shared.logging import get_logger
from flashme.use_cases import (
    CreateQuizGenerationTaskUseCase,
    FetchOngoingQuizGenerationTasksUseCase,
    FetchQuestionsForUserUseCase,
    FetchQuizGenerationTaskForUserUseCase,
    FetchQuizGenerationTasksForUserUseCase,
    SoftDeleteQuizGenerationTaskForUserUseCase,
    UserAddsQuestionUseCase,
    UserAnswersQuestionUseCase,
    UserEditsAnswerUseCase,
    UserEditsQuestionUseCase,
)

logger = get_logger()


@dataclass
class QuizServices:
    """Контейнер собранных сервисов и сценариев."""

    repositories: Repositories
    generator: QuizGenerator
    storage: QuizStorageService
    processor: QuizProcessor
    runner: BackgroundTaskRunner
    selector: QuestionSelector

    create_task: CreateQuizGenerationTaskUseCase
    fetch_task: FetchQuizGenerationTaskForUserUseCase
    fetch_tasks: FetchQuizGenerationTasksForUserUseCase
    fetch_ongoing_tasks: FetchOngoingQuizGenerationTasksUseCase
    delete_task: SoftDeleteQuizGenerationTaskForUserUseCase
    fetch_questions: FetchQuestionsForUserUseCase
    answer_question: UserAnswersQuestionUseCase
    add_question: UserAddsQuestionUseCase
    edit_question: UserEditsQuestionUseCase
    edit_answer: UserEditsAnswerUseCase

    async def shutdown(self) -> None:
        """Остановить фоновые генерации."""
        await self.runner.shutdown()


def build_quiz_services(
    repositories: Repositories,
    generation_client: GenerationClient,
    config: Settings,
    title_generator: TitleGenerator | None = None,
    selector: QuestionSelector | None = None,
    runner: BackgroundTaskRunner | None = None,
) -> QuizServices:
    """Собрать QuizServices без изменения глобального состояния.

    Args:
        repositories: Набор репозиториев
        generation_client: Клиент генерации
        config: Настройки
        title_generator: Источник заголовков (по умолчанию по настройкам)
        selector: Подборщик вопросов (по умолчанию с системным RNG)
        runner: Runner фоновых задач (по умолчанию с лимитом из настроек)

    Returns:
        QuizServices

    """
    quiz = config.quiz

    generator = QuizGenerator(
        generation_client=generation_client,
        title_generator=title_generator or create_title_generator(config, generation_client),
        excerpt_length=quiz.error_excerpt_length,
    )
    storage = QuizStorageService(repositories.tasks, repositories.questions, repositories.answers)
    processor = QuizProcessor(generator, storage)
    runner = runner or BackgroundTaskRunner(max_concurrency=quiz.max_concurrent_generations)
    selector = selector or QuestionSelector()

    return QuizServices(
        repositories=repositories,
        generator=generator,
        storage=storage,
        processor=processor,
        runner=runner,
        selector=selector,
        create_task=CreateQuizGenerationTaskUseCase(
            user_repository=repositories.users,
            storage=storage,
            processor=processor,
            runner=runner,
            max_text_length=quiz.max_text_length,
        ),
        fetch_task=FetchQuizGenerationTaskForUserUseCase(repositories.users, repositories.tasks),
        fetch_tasks=FetchQuizGenerationTasksForUserUseCase(repositories.users, repositories.tasks),
        fetch_ongoing_tasks=FetchOngoingQuizGenerationTasksUseCase(repositories.users, repositories.tasks),
        delete_task=SoftDeleteQuizGenerationTaskForUserUseCase(
            repositories.users,
            repositories.tasks,
            repositories.questions,
            repositories.answers,
        ),
        fetch_questions=FetchQuestionsForUserUseCase(
            repositories.users,
            repositories.questions,
            repositories.user_answers,
            selector=selector,
            default_limit=quiz.default_questions_limit,
        ),
        answer_question=UserAnswersQuestionUseCase(
            repositories.users,
            repositories.user_answers,
            repositories.answers,
        ),
        add_question=UserAddsQuestionUseCase(
            repositories.users,
            repositories.tasks,
            repositories.questions,
            repositories.answers,
        ),
        edit_question=UserEditsQuestionUseCase(repositories.users, repositories.tasks, repositories.questions),
        edit_answer=UserEditsAnswerUseCase(
            repositories.users,
            repositories.tasks,
            repositories.questions,
            repositories.answers,
        ),
    )


# Singleton instance
_quiz_services_instance: QuizServices | None = None


def get_quiz_services() -> QuizServices:
    """Получить singleton instance QuizServices.

    Raises:
        RuntimeError: Если сервисы не инициализированы

    """
    if _quiz_services_instance is None:
        msg = "QuizServices не инициализированы. Вызовите create_quiz_services() сначала."
        raise RuntimeError(msg)

    return _quiz_services_instance


def create_quiz_services(
    repositories: Repositories,
    generation_client: GenerationClient | None = None,
    config: Settings | None = None,
) -> QuizServices:
    """Создать и зарегистрировать глобальные QuizServices.

    Args:
        repositories: Набор репозиториев
        generation_client: Клиент генерации (если None, создаётся по настройкам)
        config: Настройки (если None, глобальные settings)

    Returns:
        QuizServices instance

    """
    global _quiz_services_instance

    config = config or settings
    client = generation_client or create_generation_client(config)

    _quiz_services_instance = build_quiz_services(repositories, client, config)

    logger.info(
        "QuizServices инициализированы",
        provider=config.generation.provider.value,
        max_concurrent_generations=config.quiz.max_concurrent_generations,
    )

    return _quiz_services_instance


# Для тестирования
def set_quiz_services(services: QuizServices | None) -> None:
    """Установить custom instance (для тестов)."""
    global _quiz_services_instance
    _quiz_services_instance = services
