from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratedQuestion:
    question: str
    correct_answer: str
    difficulty: int
    points: int


@dataclass(frozen=True)
class Question:
    id: str
    memory_id: str
    question: str
    correct_answer: str
    points: int
    difficulty: int | None = None
