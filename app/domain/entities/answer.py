from dataclasses import dataclass


@dataclass(frozen=True)
class AnswerComparison:
    submitted_text: str
    reference_text: str
    point_value: int


@dataclass(frozen=True)
class AnswerResult:
    match_ratio: float
    is_correct: bool
    points_awarded: int


@dataclass(frozen=True)
class UserAnswer:
    id: str
    user_id: str
    question_id: str
    answer: str
    is_correct: bool
    created_at: str | None = None
