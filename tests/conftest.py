from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from app.application.use_cases.auth import AuthUseCase
from app.application.use_cases.daily_questions import GetDailyQuestionsUseCase
from app.application.use_cases.generate_questions import GenerateQuestionsUseCase
from app.application.use_cases.memories import MemoryUseCase
from app.application.use_cases.submit_answer import SubmitAnswerUseCase
from app.application.use_cases.user_progress import GetUserProgressUseCase
from app.infrastructure.llm.mock_llm import MockLLM
from app.infrastructure.security.tokens import TokenSigner
from app.infrastructure.storage.memory_storage import MemoryPhotoStorage
from app.infrastructure.store.memory_store import MemoryMemoraidStore
from app.main import app
from app.wiring import dependencies


@pytest.fixture
def store() -> MemoryMemoraidStore:
    return MemoryMemoraidStore()


@pytest.fixture
def photos() -> MemoryPhotoStorage:
    return MemoryPhotoStorage()


@pytest.fixture
def signer() -> TokenSigner:
    return TokenSigner(secret="test-secret")


@pytest.fixture
def auth(store, signer) -> AuthUseCase:
    return AuthUseCase(store=store, signer=signer)


@pytest.fixture
def memories(store, photos) -> MemoryUseCase:
    return MemoryUseCase(store=store, photos=photos)


@pytest.fixture
def client(store, photos, signer):
    overrides = {
        dependencies.get_auth_use_case: lambda: AuthUseCase(store=store, signer=signer),
        dependencies.get_memory_use_case: lambda: MemoryUseCase(store=store, photos=photos),
        dependencies.get_generate_use_case: lambda: GenerateQuestionsUseCase(llm=MockLLM(), store=store),
        dependencies.get_daily_use_case: lambda: GetDailyQuestionsUseCase(store=store, rng=random.Random(7)),
        dependencies.get_submit_answer_use_case: lambda: SubmitAnswerUseCase(store=store),
        dependencies.get_progress_use_case: lambda: GetUserProgressUseCase(store=store),
    }
    app.dependency_overrides.update(overrides)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
