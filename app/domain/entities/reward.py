from dataclasses import dataclass

QUESTION_CORRECT = "question_correct"


@dataclass(frozen=True)
class Reward:
    id: str
    user_id: str
    points: int
    reward_type: str = QUESTION_CORRECT
    created_at: str | None = None


@dataclass(frozen=True)
class Progress:
    correct_answers: int
    total_answers: int
    accuracy_rate: str
    total_points: int
