from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.exceptions import NotFoundError
from app.application.ports.llm import LLMPort
from app.application.ports.memoraid_store import MemoraidStorePort
from app.domain.entities.question import GeneratedQuestion, Question

MAX_GENERATE_COUNT = 20


logger = logging.getLogger(__name__)


@dataclass
class GenerateQuestionsUseCase:
    llm: LLMPort
    store: MemoraidStorePort
    count: int = 5

    def execute(self, memory_id: str) -> list[Question]:
        memory = self.store.get_memory_view(memory_id)
        if memory is None:
            raise NotFoundError("Memory not found")

        count_value = min(max(0, int(self.count)), MAX_GENERATE_COUNT)
        if count_value <= 0:
            return []

        generated = self.llm.generate_questions(memory=memory, count=count_value) or []

        cleaned: list[GeneratedQuestion] = []
        seen: set[str] = set()
        for q in generated:
            key = q.question.strip().lower()
            if not key or not q.correct_answer.strip() or key in seen:
                continue
            seen.add(key)
            cleaned.append(q)
            if len(cleaned) >= count_value:
                break

        questions = self.store.insert_questions(memory_id, cleaned)
        logger.info("Questions generated", extra={"memory_id": memory_id, "reason": f"count={len(questions)}"})
        return questions

    def list_for_memory(self, memory_id: str) -> list[Question]:
        return self.store.list_questions(memory_id)
