"""Anthropic клиент генерации квизов (Claude models)."""

from typing import Any

from anthropic import AsyncAnthropic

from flashme.core.config import GenerationSettings
from flashme.core.constants import DEFAULT_TITLE_MAX_LENGTH, DEFAULT_TITLE_MAX_TOKENS, SYSTEM_PROMPT, TITLE_SYSTEM_PROMPT
from flashme.providers.base import QuestionDraft
from flashme.providers.formatters import build_quiz_prompt, build_title_prompt, clean_title, parse_question_drafts
from flashme.shared.logging import get_logger

logger = get_logger()


class AnthropicGenerationClient:
    """Клиент генерации на Anthropic Messages API.

    У Claude нет json mode, поэтому JSON извлекается из текста ответа.
    """

    def __init__(
        self,
        config: GenerationSettings,
        title_max_length: int = DEFAULT_TITLE_MAX_LENGTH,
        client: AsyncAnthropic | None = None,
    ) -> None:
        self.config = config
        self.model_name = config.model
        self.title_max_length = title_max_length

        if client is None:
            if not config.api_key:
                msg = "Anthropic API key не установлен (FLASHME__GENERATION__API_KEY)"
                raise ValueError(msg)

            client_kwargs: dict[str, Any] = {
                "api_key": config.api_key,
                "base_url": config.base_url,
                "max_retries": config.max_retries,
            }
            if config.timeout_seconds is not None:
                client_kwargs["timeout"] = config.timeout_seconds
            client = AsyncAnthropic(**client_kwargs)

        self.client = client

        logger.info("AnthropicGenerationClient инициализирован", model_name=self.model_name)

    async def _complete(self, system: str, prompt: str, max_tokens: int) -> str:
        response = await self.client.messages.create(
            model=self.model_name,
            max_tokens=max_tokens,
            system=system,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.config.temperature,
        )

        # Claude возвращает list[ContentBlock]
        text = ""
        for block in response.content:
            if block.type == "text":
                text += block.text
        return text

    async def generate(self, text: str) -> list[QuestionDraft]:
        """Сгенерировать черновики вопросов.

        Args:
            text: Исходный текст

        Returns:
            Список черновиков

        Raises:
            ValueError: Ответ модели не соответствует формату квиза

        """
        logger.debug("Начало генерации квиза", model=self.model_name, text_length=len(text))

        prompt = build_quiz_prompt(text, self.config.questions_count, self.config.answers_per_question)
        content = await self._complete(SYSTEM_PROMPT, prompt, self.config.max_tokens)

        if not content.strip():
            logger.warning("Пустой ответ модели", model=self.model_name)
            return []

        drafts = parse_question_drafts(content)

        logger.info("Генерация квиза завершена", model=self.model_name, questions=len(drafts))
        return drafts

    async def generate_title(self, text: str) -> str:
        prompt = build_title_prompt(text, self.title_max_length)
        content = await self._complete(TITLE_SYSTEM_PROMPT, prompt, DEFAULT_TITLE_MAX_TOKENS)
        return clean_title(content, self.title_max_length)
