"""
Tests for the request-handling use cases against the in-memory adapters.
"""

from __future__ import annotations

import random

import pytest

from app.application.exceptions import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    LLMContractError,
    NotFoundError,
)
from app.application.ports.llm import LLMPort
from app.application.use_cases.daily_questions import GetDailyQuestionsUseCase
from app.application.use_cases.generate_questions import GenerateQuestionsUseCase
from app.application.use_cases.memories import MemoryUseCase, photo_file_name
from app.application.use_cases.submit_answer import SubmitAnswerUseCase
from app.application.use_cases.user_progress import GetUserProgressUseCase, format_accuracy
from app.domain.entities.question import GeneratedQuestion
from app.domain.entities.reward import QUESTION_CORRECT
from app.infrastructure.llm.mock_llm import MockLLM


def _seed_memory(auth, memories, description="We had a picnic by the lake. Grandpa caught a fish."):
    user = auth.register(name="Ana", email="ana@example.com", phone=None, password="pw").user
    contributor = memories.create_contributor(
        name="Maria",
        email="maria@example.com",
        relationship_type="sister",
        relationship_years=30,
        user_id=user.id,
    )
    memory = memories.create_memory(
        contributor_id=contributor.id,
        photo_url="https://storage.test/p.jpg",
        description=description,
        event_date="2019-07-04",
    )
    return user, contributor, memory


class FixedLLM(LLMPort):
    def __init__(self, questions: list[GeneratedQuestion]) -> None:
        self.questions = questions

    def generate_questions(self, memory, count):
        return list(self.questions)


class BrokenLLM(LLMPort):
    def generate_questions(self, memory, count):
        raise LLMContractError("Generate: invalid JSON.")


# auth


def test_register_then_login(auth):
    registered = auth.register(name="Ana", email="ana@example.com", phone="555", password="secret")
    assert registered.user.email == "ana@example.com"
    assert auth.authenticate(registered.token).id == registered.user.id

    logged_in = auth.login(email="ana@example.com", password="secret")
    assert logged_in.user.id == registered.user.id


def test_register_requires_fields(auth):
    with pytest.raises(ValueError):
        auth.register(name="", email="ana@example.com", phone=None, password="pw")


def test_register_rejects_duplicate_email(auth):
    auth.register(name="Ana", email="ana@example.com", phone=None, password="pw")
    with pytest.raises(ConflictError):
        auth.register(name="Ana 2", email="ana@example.com", phone=None, password="pw")


def test_register_removes_user_when_credentials_fail(auth, store, monkeypatch):
    def boom(credentials):
        raise RuntimeError("db down")

    monkeypatch.setattr(store, "put_credentials", boom)
    with pytest.raises(RuntimeError):
        auth.register(name="Ana", email="ana@example.com", phone=None, password="pw")
    assert store.get_user_by_email("ana@example.com") is None


def test_login_errors(auth):
    with pytest.raises(NotFoundError):
        auth.login(email="nobody@example.com", password="pw")
    auth.register(name="Ana", email="ana@example.com", phone=None, password="pw")
    with pytest.raises(AuthenticationError):
        auth.login(email="ana@example.com", password="wrong")
    with pytest.raises(ValueError):
        auth.login(email="ana@example.com", password="")


def test_share_token_round_trip_and_purpose(auth):
    user = auth.register(name="Ana", email="ana@example.com", phone=None, password="pw")
    share = auth.generate_share_token(user.user.id)
    assert auth.verify_share_token(share).id == user.user.id

    # a session token is not a share token
    with pytest.raises(AuthenticationError):
        auth.verify_share_token(user.token)


# memories


def test_photo_file_name_keeps_extension():
    name = photo_file_name("beach.day.JPG")
    assert name.endswith(".JPG")
    assert len(name.split(".")[0]) == 36


@pytest.mark.parametrize("original", ["holiday./avatar", "x./../../avatar", "a.b\\c", "noext", "", None])
def test_photo_file_name_drops_unsafe_extensions(original):
    name = photo_file_name(original)
    assert len(name) == 36
    assert "/" not in name and "\\" not in name


def test_upload_photo_names_stay_unique_for_path_like_names(memories, photos):
    first = memories.upload_photo("holiday./avatar", b"first", "image/png")
    second = memories.upload_photo("x./avatar", b"second", "image/png")

    assert first != second
    assert photos.objects[first.rsplit("/", 1)[-1]][0] == b"first"
    assert photos.objects[second.rsplit("/", 1)[-1]][0] == b"second"


def test_upload_photo_size_cap(store, photos):
    capped = MemoryUseCase(store=store, photos=photos, max_photo_bytes=4)
    assert capped.upload_photo("a.png", b"1234", "image/png")
    with pytest.raises(ValueError):
        capped.upload_photo("a.png", b"12345", "image/png")


def test_upload_photo(memories, photos):
    url = memories.upload_photo("beach.png", b"\x89PNG", "image/png")
    file_name = url.rsplit("/", 1)[-1]
    assert photos.objects[file_name] == (b"\x89PNG", "image/png")

    with pytest.raises(ValueError):
        memories.upload_photo("empty.png", b"", "image/png")


def test_contributor_requires_existing_user(memories):
    with pytest.raises(NotFoundError):
        memories.create_contributor("Maria", "m@example.com", "sister", 3, "missing-user")
    with pytest.raises(ValueError):
        memories.create_contributor("Maria", "m@example.com", "sister", None, "missing-user")
    with pytest.raises(ValueError):
        memories.create_contributor("Maria", "m@example.com", "sister", "many", "missing-user")


def test_memory_requires_existing_contributor(memories):
    with pytest.raises(NotFoundError):
        memories.create_memory("missing", "https://x/p.jpg", "desc")


def test_user_memories_newest_first(auth, memories):
    user, contributor, first = _seed_memory(auth, memories)
    second = memories.create_memory(contributor.id, "https://x/2.jpg", "Second memory")

    views = memories.get_user_memories(user.id)
    assert [v.memory.id for v in views] == [second.id, first.id]
    assert views[0].contributor_name == "Maria"
    assert memories.get_user_memories("someone-else") == []


def test_delete_memory_checks_owner(auth, memories):
    user, _, memory = _seed_memory(auth, memories)
    with pytest.raises(ForbiddenError):
        memories.delete_memory(memory.id, requesting_user_id="intruder")

    memories.delete_memory(memory.id, requesting_user_id=user.id)
    with pytest.raises(NotFoundError):
        memories.get_memory(memory.id)


def test_delete_memory_removes_its_questions(auth, memories, store):
    user, _, memory = _seed_memory(auth, memories)
    questions = GenerateQuestionsUseCase(llm=MockLLM(), store=store).execute(memory.id)

    memories.delete_memory(memory.id, requesting_user_id=user.id)

    assert store.list_questions(memory.id) == []
    assert store.get_question(questions[0].id) is None
    with pytest.raises(NotFoundError):
        SubmitAnswerUseCase(store=store).execute(user.id, questions[0].id, "Maria")


# questions


def test_generate_questions_persists_mock_output(auth, memories, store):
    _, _, memory = _seed_memory(auth, memories)
    uc = GenerateQuestionsUseCase(llm=MockLLM(), store=store)

    questions = uc.execute(memory.id)
    assert len(questions) == 5
    assert all(5 <= q.points <= 20 for q in questions)
    assert [q.id for q in uc.list_for_memory(memory.id)] == [q.id for q in questions]


def test_generate_questions_dedupes_and_drops_blank_answers(auth, memories, store):
    _, _, memory = _seed_memory(auth, memories)
    llm = FixedLLM(
        [
            GeneratedQuestion("Where?", "the lake", 2, 10),
            GeneratedQuestion("where?", "lake", 2, 10),
            GeneratedQuestion("Who?", "  ", 1, 5),
        ]
    )
    questions = GenerateQuestionsUseCase(llm=llm, store=store).execute(memory.id)
    assert [q.question for q in questions] == ["Where?"]


def test_generate_questions_errors(store, auth, memories):
    with pytest.raises(NotFoundError):
        GenerateQuestionsUseCase(llm=MockLLM(), store=store).execute("missing")

    _, _, memory = _seed_memory(auth, memories)
    with pytest.raises(LLMContractError):
        GenerateQuestionsUseCase(llm=BrokenLLM(), store=store).execute(memory.id)
    assert store.list_questions(memory.id) == []


def test_daily_questions(auth, memories, store):
    user, _, memory = _seed_memory(auth, memories)
    daily = GetDailyQuestionsUseCase(store=store, rng=random.Random(1))

    first = daily.execute(user.id)
    assert first.memory.memory.id == memory.id
    assert first.needs_questions is True

    store.insert_questions(memory.id, [GeneratedQuestion(f"Q{i}?", "lake", 1, 5) for i in range(7)])
    second = daily.execute(user.id)
    assert len(second.questions) == 5
    assert second.needs_questions is False

    with pytest.raises(NotFoundError):
        daily.execute("no-memories")


def test_submit_answer_awards_points_only_when_correct(auth, memories, store):
    user, _, memory = _seed_memory(auth, memories)
    question = store.insert_questions(
        memory.id, [GeneratedQuestion("What did Grandpa catch?", "a big fish", 2, 12)]
    )[0]
    uc = SubmitAnswerUseCase(store=store)

    right = uc.execute(user.id, question.id, "big fish")
    assert right.result.is_correct is True
    assert right.result.points_awarded == 12
    assert right.correct_answer == "a big fish"

    wrong = uc.execute(user.id, question.id, "turtle")
    assert wrong.result.is_correct is False
    assert wrong.result.points_awarded == 0

    rewards = store.list_rewards(user.id)
    assert [(r.points, r.reward_type) for r in rewards] == [(12, QUESTION_CORRECT)]
    assert store.count_answers(user.id) == 2
    assert store.count_answers(user.id, is_correct=True) == 1


def test_submit_answer_errors(store):
    uc = SubmitAnswerUseCase(store=store)
    with pytest.raises(ValueError):
        uc.execute("u", "q", "")
    with pytest.raises(NotFoundError):
        uc.execute("u", "missing", "something")


def test_progress(auth, memories, store):
    user, _, memory = _seed_memory(auth, memories)
    question = store.insert_questions(memory.id, [GeneratedQuestion("Q?", "lake", 1, 7)])[0]
    progress_uc = GetUserProgressUseCase(store=store)

    empty = progress_uc.execute(user.id)
    assert (empty.correct_answers, empty.total_answers, empty.accuracy_rate, empty.total_points) == (0, 0, "0%", 0)

    submit = SubmitAnswerUseCase(store=store)
    submit.execute(user.id, question.id, "lake")
    submit.execute(user.id, question.id, "lake")
    submit.execute(user.id, question.id, "mountain")

    progress = progress_uc.execute(user.id)
    assert progress.correct_answers == 2
    assert progress.total_answers == 3
    assert progress.accuracy_rate == "66.7%"
    assert progress.total_points == 14


def test_format_accuracy():
    assert format_accuracy(0, 0) == "0%"
    assert format_accuracy(1, 2) == "50.0%"
    assert format_accuracy(1, 3) == "33.3%"
