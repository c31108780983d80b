from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.exceptions import NotFoundError
from app.application.ports.memoraid_store import MemoraidStorePort
from app.application.utils.answer_evaluator import evaluate
from app.domain.entities.answer import AnswerResult
from app.domain.entities.reward import QUESTION_CORRECT


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmittedAnswer:
    result: AnswerResult
    correct_answer: str


@dataclass
class SubmitAnswerUseCase:
    store: MemoraidStorePort

    def execute(self, user_id: str, question_id: str, answer: str | None) -> SubmittedAnswer:
        if not answer:
            raise ValueError("Answer is required")

        question = self.store.get_question(question_id)
        if question is None:
            raise NotFoundError("Question not found")

        result = evaluate(
            submitted_text=answer,
            reference_text=question.correct_answer,
            point_value=question.points,
        )

        self.store.insert_answer(
            user_id=user_id,
            question_id=question_id,
            answer=answer,
            is_correct=result.is_correct,
        )
        if result.is_correct:
            self.store.append_reward(user_id=user_id, points=result.points_awarded, reward_type=QUESTION_CORRECT)

        logger.info(
            "Answer scored",
            extra={
                "user_id": user_id,
                "question_id": question_id,
                "is_correct": result.is_correct,
                "points": result.points_awarded,
            },
        )
        return SubmittedAnswer(result=result, correct_answer=question.correct_answer)
