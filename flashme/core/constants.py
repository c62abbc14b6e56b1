"""Константы для flashme.

Централизованное хранилище всех магических чисел и строк.
"""

# === Названия приложений ===
DEFAULT_APP_NAME = "flashme"

# === Текст для генерации ===
DEFAULT_MAX_TEXT_LENGTH = 50000
DEFAULT_ERROR_EXCERPT_LENGTH = 50
DEFAULT_TITLE_MAX_LENGTH = 80
FILE_UPLOAD_PLACEHOLDER_TEXT = "File upload task"

# === Подбор вопросов ===
DEFAULT_QUESTIONS_LIMIT = 3

# === Пагинация ===
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# === Генерация (LLM) ===
DEFAULT_GENERATION_MODEL = "gpt-4o"
DEFAULT_GENERATION_TEMPERATURE = 0.5
DEFAULT_QUESTIONS_COUNT = 10
DEFAULT_ANSWERS_PER_QUESTION = 4
DEFAULT_MAX_TOKENS = 4096
DEFAULT_TITLE_MAX_TOKENS = 32
DEFAULT_LLM_MAX_RETRIES = 2

SYSTEM_PROMPT = (
    "You are a specialized quiz generation assistant. "
    "Create concise, accurate quiz questions based on provided text."
)
TITLE_SYSTEM_PROMPT = (
    "You name study quizzes. Reply with a short title only, without quotes."
)

# === Логи ===
SENSITIVE_LOG_KEYS = frozenset(
    {"password", "token", "secret", "api_key", "access_token", "authorization"}
)
