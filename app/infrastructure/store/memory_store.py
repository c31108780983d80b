from __future__ import annotations

import itertools
import threading
import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

from app.application.ports.memoraid_store import MemoraidStorePort
from app.domain.entities.answer import UserAnswer
from app.domain.entities.memory import Contributor, Memory, MemoryView
from app.domain.entities.question import GeneratedQuestion, Question
from app.domain.entities.reward import Reward
from app.domain.entities.user import User, UserCredentials

TABLES = (
    "users",
    "user_auth",
    "memory_contributors",
    "memories",
    "questions",
    "user_answers",
    "user_rewards",
)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return str(uuid.uuid4())


class MemoryMemoraidStore(MemoraidStorePort):
    """
    Table-per-dict store keyed by record id.

    Rows are plain JSON-compatible dicts so subclasses can persist the whole
    table set by overriding `_commit`. Every row carries a `seq` used to break
    `created_at` ties when listing newest first.
    """

    def __init__(self) -> None:
        self._tables: dict[str, dict[str, dict[str, Any]]] = {name: {} for name in TABLES}
        self._seq = itertools.count(1)
        self._lock = threading.RLock()

    def _commit(self) -> None:
        pass

    def _insert(self, table: str, row: dict[str, Any], key: str = "id") -> dict[str, Any]:
        row = dict(row)
        row.setdefault("created_at", _now_iso())
        row["seq"] = next(self._seq)
        self._tables[table][row[key]] = row
        return row

    # users

    def create_user(self, name: str, email: str, phone: str | None) -> User:
        with self._lock:
            row = self._insert("users", {"id": _new_id(), "name": name, "email": email, "phone": phone})
            self._commit()
            return _user(row)

    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            row = self._tables["users"].get(user_id)
            return _user(row) if row else None

    def get_user_by_email(self, email: str) -> User | None:
        with self._lock:
            for row in self._tables["users"].values():
                if row["email"] == email:
                    return _user(row)
            return None

    def delete_user(self, user_id: str) -> None:
        with self._lock:
            self._tables["users"].pop(user_id, None)
            self._commit()

    def put_credentials(self, credentials: UserCredentials) -> None:
        with self._lock:
            self._insert("user_auth", asdict(credentials), key="user_id")
            self._commit()

    def get_credentials(self, user_id: str) -> UserCredentials | None:
        with self._lock:
            row = self._tables["user_auth"].get(user_id)
            if not row:
                return None
            return UserCredentials(
                user_id=row["user_id"],
                password_hash=row["password_hash"],
                provider=row.get("provider", "email"),
            )

    # contributors and memories

    def create_contributor(
        self,
        user_id: str,
        name: str,
        email: str,
        relationship_type: str,
        relationship_years: int,
    ) -> Contributor:
        with self._lock:
            row = self._insert(
                "memory_contributors",
                {
                    "id": _new_id(),
                    "user_id": user_id,
                    "name": name,
                    "email": email,
                    "relationship_type": relationship_type,
                    "relationship_years": relationship_years,
                },
            )
            self._commit()
            return _contributor(row)

    def get_contributor(self, contributor_id: str) -> Contributor | None:
        with self._lock:
            row = self._tables["memory_contributors"].get(contributor_id)
            return _contributor(row) if row else None

    def list_contributor_ids(self, user_id: str) -> list[str]:
        with self._lock:
            return [
                row["id"]
                for row in self._tables["memory_contributors"].values()
                if row["user_id"] == user_id
            ]

    def create_memory(
        self,
        contributor_id: str,
        photo_url: str,
        description: str,
        event_date: str | None,
    ) -> Memory:
        with self._lock:
            row = self._insert(
                "memories",
                {
                    "id": _new_id(),
                    "contributor_id": contributor_id,
                    "photo_url": photo_url,
                    "description": description,
                    "event_date": event_date,
                },
            )
            self._commit()
            return _memory(row)

    def get_memory_view(self, memory_id: str) -> MemoryView | None:
        with self._lock:
            row = self._tables["memories"].get(memory_id)
            return self._view(row) if row else None

    def list_memory_views(self, contributor_ids: list[str]) -> list[MemoryView]:
        wanted = set(contributor_ids)
        with self._lock:
            rows = [r for r in self._tables["memories"].values() if r["contributor_id"] in wanted]
            rows.sort(key=lambda r: (r["created_at"], r["seq"]), reverse=True)
            return [v for v in (self._view(r) for r in rows) if v is not None]

    def delete_memory(self, memory_id: str) -> None:
        with self._lock:
            self._tables["memories"].pop(memory_id, None)
            # answers and rewards stay as progress history
            questions = self._tables["questions"]
            for question_id in [k for k, r in questions.items() if r["memory_id"] == memory_id]:
                del questions[question_id]
            self._commit()

    def _view(self, row: dict[str, Any]) -> MemoryView | None:
        contributor = self._tables["memory_contributors"].get(row["contributor_id"])
        if contributor is None:
            return None
        return MemoryView(
            memory=_memory(row),
            contributor_name=contributor["name"],
            relationship_type=contributor["relationship_type"],
            user_id=contributor["user_id"],
        )

    # questions, answers and rewards

    def insert_questions(self, memory_id: str, questions: list[GeneratedQuestion]) -> list[Question]:
        with self._lock:
            rows = [
                self._insert(
                    "questions",
                    {
                        "id": _new_id(),
                        "memory_id": memory_id,
                        "question": q.question,
                        "correct_answer": q.correct_answer,
                        "points": q.points,
                        "difficulty": q.difficulty,
                    },
                )
                for q in questions
            ]
            self._commit()
            return [_question(r) for r in rows]

    def get_question(self, question_id: str) -> Question | None:
        with self._lock:
            row = self._tables["questions"].get(question_id)
            return _question(row) if row else None

    def list_questions(self, memory_id: str, limit: int | None = None) -> list[Question]:
        with self._lock:
            rows = sorted(
                (r for r in self._tables["questions"].values() if r["memory_id"] == memory_id),
                key=lambda r: r["seq"],
            )
            if limit is not None:
                rows = rows[:limit]
            return [_question(r) for r in rows]

    def insert_answer(self, user_id: str, question_id: str, answer: str, is_correct: bool) -> UserAnswer:
        with self._lock:
            row = self._insert(
                "user_answers",
                {
                    "id": _new_id(),
                    "user_id": user_id,
                    "question_id": question_id,
                    "answer": answer,
                    "is_correct": bool(is_correct),
                },
            )
            self._commit()
            return UserAnswer(
                id=row["id"],
                user_id=row["user_id"],
                question_id=row["question_id"],
                answer=row["answer"],
                is_correct=row["is_correct"],
                created_at=row["created_at"],
            )

    def count_answers(self, user_id: str, is_correct: bool | None = None) -> int:
        with self._lock:
            return sum(
                1
                for r in self._tables["user_answers"].values()
                if r["user_id"] == user_id and (is_correct is None or r["is_correct"] == is_correct)
            )

    def append_reward(self, user_id: str, points: int, reward_type: str) -> Reward:
        with self._lock:
            row = self._insert(
                "user_rewards",
                {"id": _new_id(), "user_id": user_id, "points": int(points), "reward_type": reward_type},
            )
            self._commit()
            return _reward(row)

    def list_rewards(self, user_id: str) -> list[Reward]:
        with self._lock:
            rows = sorted(
                (r for r in self._tables["user_rewards"].values() if r["user_id"] == user_id),
                key=lambda r: r["seq"],
            )
            return [_reward(r) for r in rows]


def _user(row: dict[str, Any]) -> User:
    return User(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        phone=row.get("phone"),
        created_at=row.get("created_at"),
    )


def _contributor(row: dict[str, Any]) -> Contributor:
    return Contributor(
        id=row["id"],
        user_id=row["user_id"],
        name=row["name"],
        email=row["email"],
        relationship_type=row["relationship_type"],
        relationship_years=row["relationship_years"],
        created_at=row.get("created_at"),
    )


def _memory(row: dict[str, Any]) -> Memory:
    return Memory(
        id=row["id"],
        contributor_id=row["contributor_id"],
        photo_url=row["photo_url"],
        description=row["description"],
        event_date=row.get("event_date"),
        created_at=row.get("created_at"),
    )


def _question(row: dict[str, Any]) -> Question:
    return Question(
        id=row["id"],
        memory_id=row["memory_id"],
        question=row["question"],
        correct_answer=row["correct_answer"],
        points=int(row["points"]),
        difficulty=row.get("difficulty"),
    )


def _reward(row: dict[str, Any]) -> Reward:
    return Reward(
        id=row["id"],
        user_id=row["user_id"],
        points=int(row["points"]),
        reward_type=row["reward_type"],
        created_at=row.get("created_at"),
    )
