from abc import ABC, abstractmethod

from app.domain.entities.answer import UserAnswer
from app.domain.entities.memory import Contributor, Memory, MemoryView
from app.domain.entities.question import GeneratedQuestion, Question
from app.domain.entities.reward import Reward
from app.domain.entities.user import User, UserCredentials


class MemoraidStorePort(ABC):
    @abstractmethod
    def create_user(self, name: str, email: str, phone: str | None) -> User:
        raise NotImplementedError

    @abstractmethod
    def get_user(self, user_id: str) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def delete_user(self, user_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def put_credentials(self, credentials: UserCredentials) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_credentials(self, user_id: str) -> UserCredentials | None:
        raise NotImplementedError

    @abstractmethod
    def create_contributor(
        self,
        user_id: str,
        name: str,
        email: str,
        relationship_type: str,
        relationship_years: int,
    ) -> Contributor:
        raise NotImplementedError

    @abstractmethod
    def get_contributor(self, contributor_id: str) -> Contributor | None:
        raise NotImplementedError

    @abstractmethod
    def list_contributor_ids(self, user_id: str) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def create_memory(
        self,
        contributor_id: str,
        photo_url: str,
        description: str,
        event_date: str | None,
    ) -> Memory:
        raise NotImplementedError

    @abstractmethod
    def get_memory_view(self, memory_id: str) -> MemoryView | None:
        raise NotImplementedError

    @abstractmethod
    def list_memory_views(self, contributor_ids: list[str]) -> list[MemoryView]:
        """Memories submitted by any of `contributor_ids`, newest first."""
        raise NotImplementedError

    @abstractmethod
    def delete_memory(self, memory_id: str) -> None:
        """Remove the memory and its questions. Answers and rewards are kept."""
        raise NotImplementedError

    @abstractmethod
    def insert_questions(self, memory_id: str, questions: list[GeneratedQuestion]) -> list[Question]:
        raise NotImplementedError

    @abstractmethod
    def get_question(self, question_id: str) -> Question | None:
        raise NotImplementedError

    @abstractmethod
    def list_questions(self, memory_id: str, limit: int | None = None) -> list[Question]:
        raise NotImplementedError

    @abstractmethod
    def insert_answer(self, user_id: str, question_id: str, answer: str, is_correct: bool) -> UserAnswer:
        raise NotImplementedError

    @abstractmethod
    def count_answers(self, user_id: str, is_correct: bool | None = None) -> int:
        raise NotImplementedError

    @abstractmethod
    def append_reward(self, user_id: str, points: int, reward_type: str) -> Reward:
        raise NotImplementedError

    @abstractmethod
    def list_rewards(self, user_id: str) -> list[Reward]:
        raise NotImplementedError
