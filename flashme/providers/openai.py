"""OpenAI клиент генерации квизов.

Использует Chat Completions с response_format json_object.
"""

from typing import Any

from openai import AsyncOpenAI

from flashme.core.config import GenerationSettings
from flashme.core.constants import DEFAULT_TITLE_MAX_LENGTH, DEFAULT_TITLE_MAX_TOKENS, SYSTEM_PROMPT, TITLE_SYSTEM_PROMPT
from flashme.providers.base import QuestionDraft
from flashme.providers.formatters import build_quiz_prompt, build_title_prompt, clean_title, parse_question_drafts
from flashme.shared.logging import get_logger

logger = get_logger()


class OpenAIGenerationClient:
    """Клиент генерации на официальном OpenAI API.

    Реализует GenerationClient и TitleGenerator.
    """

    def __init__(
        self,
        config: GenerationSettings,
        title_max_length: int = DEFAULT_TITLE_MAX_LENGTH,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Инициализировать клиента.

        Args:
            config: Настройки генерации
            title_max_length: Максимальная длина заголовка
            client: Готовый AsyncOpenAI (если None, создаётся из config)

        Raises:
            ValueError: Если не задан API ключ и не передан client

        """
        self.config = config
        self.model_name = config.model
        self.title_max_length = title_max_length

        if client is None:
            if not config.api_key:
                msg = "OpenAI API key не установлен (FLASHME__GENERATION__API_KEY)"
                raise ValueError(msg)

            client_kwargs: dict[str, Any] = {
                "api_key": config.api_key,
                "base_url": config.base_url,
                "max_retries": config.max_retries,
            }
            if config.timeout_seconds is not None:
                client_kwargs["timeout"] = config.timeout_seconds
            client = AsyncOpenAI(**client_kwargs)

        self.client = client

        logger.info("OpenAIGenerationClient инициализирован", model_name=self.model_name, base_url=config.base_url)

    async def _complete(self, system: str, prompt: str, max_tokens: int, json_mode: bool) -> str:
        kwargs: dict[str, Any] = {
            "model": self.model_name,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.config.temperature,
            "max_tokens": max_tokens,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        response = await self.client.chat.completions.create(**kwargs)

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def generate(self, text: str) -> list[QuestionDraft]:
        """Сгенерировать черновики вопросов.

        Args:
            text: Исходный текст

        Returns:
            Список черновиков (пустой, если модель ничего не вернула)

        Raises:
            ValueError: Ответ модели не соответствует формату квиза

        """
        logger.debug("Начало генерации квиза", model=self.model_name, text_length=len(text))

        prompt = build_quiz_prompt(text, self.config.questions_count, self.config.answers_per_question)
        content = await self._complete(SYSTEM_PROMPT, prompt, self.config.max_tokens, json_mode=True)

        if not content.strip():
            logger.warning("Пустой ответ модели", model=self.model_name)
            return []

        drafts = parse_question_drafts(content)

        logger.info("Генерация квиза завершена", model=self.model_name, questions=len(drafts))
        return drafts

    async def generate_title(self, text: str) -> str:
        """Сгенерировать заголовок квиза."""
        prompt = build_title_prompt(text, self.title_max_length)
        content = await self._complete(TITLE_SYSTEM_PROMPT, prompt, DEFAULT_TITLE_MAX_TOKENS, json_mode=False)
        return clean_title(content, self.title_max_length)
