from __future__ import annotations

from dataclasses import dataclass

from app.application.ports.memoraid_store import MemoraidStorePort
from app.domain.entities.reward import Progress


def format_accuracy(correct: int, total: int) -> str:
    if total <= 0:
        return "0%"
    return f"{correct / total * 100:.1f}%"


@dataclass
class GetUserProgressUseCase:
    store: MemoraidStorePort

    def execute(self, user_id: str) -> Progress:
        correct = self.store.count_answers(user_id, is_correct=True)
        total = self.store.count_answers(user_id)
        total_points = sum(r.points for r in self.store.list_rewards(user_id))
        return Progress(
            correct_answers=correct,
            total_answers=total,
            accuracy_rate=format_accuracy(correct, total),
            total_points=total_points,
        )
