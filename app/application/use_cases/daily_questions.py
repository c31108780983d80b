from __future__ import annotations

import random
from dataclasses import dataclass, field

from app.application.exceptions import NotFoundError
from app.application.ports.memoraid_store import MemoraidStorePort
from app.domain.entities.memory import MemoryView
from app.domain.entities.question import Question


@dataclass(frozen=True)
class DailyQuestions:
    memory: MemoryView
    questions: list[Question]

    @property
    def needs_questions(self) -> bool:
        return not self.questions


@dataclass
class GetDailyQuestionsUseCase:
    store: MemoraidStorePort
    limit: int = 5
    rng: random.Random = field(default_factory=random.Random)

    def execute(self, user_id: str) -> DailyQuestions:
        contributor_ids = self.store.list_contributor_ids(user_id)
        memories = self.store.list_memory_views(contributor_ids) if contributor_ids else []
        if not memories:
            raise NotFoundError("No memories found for this user")

        memory = self.rng.choice(memories)
        questions = self.store.list_questions(memory.memory.id, limit=self.limit)
        return DailyQuestions(memory=memory, questions=questions)
