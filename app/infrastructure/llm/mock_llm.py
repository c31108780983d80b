from __future__ import annotations

from app.application.ports.llm import LLMPort
from app.domain.entities.memory import MemoryView
from app.domain.entities.question import GeneratedQuestion


class MockLLM(LLMPort):
    def generate_questions(self, memory: MemoryView, count: int) -> list[GeneratedQuestion]:
        description = memory.memory.description.strip()
        base = [
            GeneratedQuestion(
                question="Who shared this memory with you?",
                correct_answer=memory.contributor_name,
                difficulty=1,
                points=5,
            ),
            GeneratedQuestion(
                question=f"How is {memory.contributor_name} related to you?",
                correct_answer=memory.relationship_type,
                difficulty=2,
                points=8,
            ),
            GeneratedQuestion(
                question="What happened in this memory?",
                correct_answer=description,
                difficulty=4,
                points=16,
            ),
        ]
        if memory.memory.event_date:
            base.append(
                GeneratedQuestion(
                    question="When did this happen?",
                    correct_answer=memory.memory.event_date,
                    difficulty=3,
                    points=12,
                )
            )

        sentences = [s.strip() for s in description.split(".") if s.strip()]
        for i, sentence in enumerate(sentences, start=1):
            if len(base) >= count:
                break
            base.append(
                GeneratedQuestion(
                    question=f"Can you recall detail #{i} of this memory?",
                    correct_answer=sentence,
                    difficulty=5,
                    points=20,
                )
            )
        return base[:count]
