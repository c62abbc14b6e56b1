"""Question Selector - адаптивный подбор вопросов для практики.

Приоритет у вопросов, на которые пользователь ещё не отвечал,
затем у вопросов с наименьшим числом ответов.
"""

import random
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from flashme.entities import Question, UserAnswer


def count_question_frequencies(user_answers: Iterable[UserAnswer]) -> Counter[str]:
    """Посчитать число ответов пользователя по каждому question_id."""
    return Counter(user_answer.question_id for user_answer in user_answers)


class QuestionSelector:
    """Подбор до limit вопросов из пула с учётом истории ответов.

    Источник случайности инжектируется: в тестах передаётся
    random.Random(seed), по умолчанию используется системный RNG.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.SystemRandom()

    def select_questions(
        self,
        all_questions: Sequence[Question],
        user_answers: Sequence[UserAnswer],
        limit: int,
    ) -> list[Question]:
        """Подобрать вопросы по истории ответов пользователя.

        Args:
            all_questions: Пул вопросов
            user_answers: История ответов пользователя
            limit: Сколько вопросов вернуть

        Returns:
            min(limit, len(pool)) вопросов без повторов (пустой список при limit <= 0)

        """
        return self.select_questions_with_frequencies(
            all_questions,
            count_question_frequencies(user_answers),
            limit,
        )

    def select_questions_with_frequencies(
        self,
        questions: Sequence[Question],
        frequencies: Mapping[str, int],
        limit: int,
    ) -> list[Question]:
        """Подобрать вопросы по готовой карте частот question_id -> count.

        Вопросы, отсутствующие в карте или с частотой 0, считаются
        неотвеченными.
        """
        if limit <= 0:
            return []

        pool = self._unique(questions)
        unanswered = [q for q in pool if frequencies.get(q.id, 0) == 0]

        if len(unanswered) >= limit:
            return self.rng.sample(unanswered, limit)

        answered = [q for q in pool if frequencies.get(q.id, 0) > 0]
        # sorted стабилен: при равной частоте сохраняется порядок пула
        answered.sort(key=lambda q: frequencies.get(q.id, 0))

        if not unanswered:
            return answered[:limit]

        combined = unanswered + answered[: limit - len(unanswered)]
        self.rng.shuffle(combined)
        return combined[:limit]

    @staticmethod
    def _unique(questions: Sequence[Question]) -> list[Question]:
        seen: set[str] = set()
        unique: list[Question] = []
        for question in questions:
            if question.id not in seen:
                seen.add(question.id)
                unique.append(question)
        return unique
