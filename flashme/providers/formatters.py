"""Разбор JSON ответов LLM.

Включает извлечение JSON из markdown блоков и валидацию через Pydantic.
"""

import re

import orjson
from pydantic import ValidationError

from flashme.providers.base import GeneratedQuiz, QuestionDraft


def extract_json(text: str) -> str:
    """Извлечение JSON из текста.

    Пытается найти JSON в следующем порядке:
    1. Markdown code block с языком json: ```json ... ```
    2. Обычный code block: ``` ... ```
    3. JSON объект {...} или массив [...] в тексте, что начинается раньше

    Args:
        text: Исходный текст

    Returns:
        Извлечённый JSON текст

    Raises:
        ValueError: Если JSON не найден

    """
    json_match = re.search(r"```json\s*(.*?)\s*```", text, re.DOTALL | re.IGNORECASE)
    if json_match:
        return json_match.group(1).strip()

    code_match = re.search(r"```\s*(.*?)\s*```", text, re.DOTALL)
    if code_match:
        code_content = code_match.group(1).strip()
        if code_content.startswith(("{", "[")):
            return code_content

    matches = [
        match
        for match in (re.search(r"\{.*\}", text, re.DOTALL), re.search(r"\[.*\]", text, re.DOTALL))
        if match
    ]
    if matches:
        return min(matches, key=lambda match: match.start()).group(0)

    msg = "No JSON found in response"
    raise ValueError(msg)


def parse_question_drafts(text: str) -> list[QuestionDraft]:
    """Распарсить ответ модели в черновики вопросов.

    Поддерживает как объект {"questions": [...]} (или {"data": [...]}),
    так и голый массив вопросов.

    Args:
        text: Текст ответа модели

    Returns:
        Список черновиков

    Raises:
        ValueError: Если ответ не является корректным JSON квиза

    """
    json_text = extract_json(text)

    try:
        parsed = orjson.loads(json_text)
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON in response: {e}\nText: {json_text[:200]}"
        raise ValueError(msg) from e

    if isinstance(parsed, dict) and "data" in parsed and "questions" not in parsed:
        parsed = {"questions": parsed["data"]}
    elif isinstance(parsed, list):
        parsed = {"questions": parsed}

    try:
        return GeneratedQuiz.model_validate(parsed).questions
    except ValidationError as e:
        msg = f"Response does not match quiz schema: {e}"
        raise ValueError(msg) from e


def build_quiz_prompt(text: str, questions_count: int, answers_per_question: int) -> str:
    """Собрать пользовательский промпт генерации квиза."""
    return (
        f'Generate {questions_count} quiz questions based on this text: "{text}"\n\n'
        f"Each question must have exactly {answers_per_question} answers "
        "and exactly one of them must be correct.\n"
        'Respond with JSON only: {"questions": [{"question": "...", '
        '"answers": [{"text": "...", "isCorrect": true}]}]}'
    )


def build_title_prompt(text: str, max_length: int) -> str:
    """Собрать промпт для заголовка квиза."""
    return f'Write a title of at most {max_length} characters for a quiz about this text: "{text}"'


def clean_title(raw: str, max_length: int) -> str:
    """Нормализовать заголовок из ответа модели."""
    title = " ".join(raw.split()).strip("\"'")
    return title[:max_length].rstrip()
