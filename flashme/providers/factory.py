"""Фабрика клиентов генерации по настройкам."""

from flashme.core.config import Settings
from flashme.core.enums import GenerationProvider
from flashme.providers.anthropic import AnthropicGenerationClient
from flashme.providers.base import ExcerptTitleGenerator, GenerationClient, TitleGenerator
from flashme.providers.openai import OpenAIGenerationClient


def create_generation_client(config: Settings) -> OpenAIGenerationClient | AnthropicGenerationClient:
    """Создать клиента генерации для настроенного провайдера.

    Args:
        config: Настройки приложения

    Returns:
        Клиент генерации

    Raises:
        ValueError: Неизвестный провайдер или не задан API ключ

    """
    generation = config.generation
    title_max_length = config.quiz.title_max_length

    if generation.provider == GenerationProvider.OPENAI:
        return OpenAIGenerationClient(generation, title_max_length=title_max_length)
    if generation.provider == GenerationProvider.ANTHROPIC:
        return AnthropicGenerationClient(generation, title_max_length=title_max_length)

    msg = f"Неизвестный провайдер генерации: {generation.provider}"
    raise ValueError(msg)


def create_title_generator(config: Settings, generation_client: GenerationClient) -> TitleGenerator:
    """Выбрать источник заголовков.

    LLM используется только при generation.llm_titles и если клиент
    умеет generate_title.
    """
    if config.generation.llm_titles and isinstance(generation_client, TitleGenerator):
        return generation_client
    return ExcerptTitleGenerator(max_length=config.quiz.title_max_length)
