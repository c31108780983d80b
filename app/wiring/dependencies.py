from functools import lru_cache
import logging
import secrets

from fastapi import Depends, Header, HTTPException

from app.core.config import settings
from app.application.exceptions import AuthenticationError, NotFoundError
from app.application.ports.llm import LLMPort
from app.application.ports.memoraid_store import MemoraidStorePort
from app.application.ports.photo_storage import PhotoStoragePort
from app.application.use_cases.auth import AuthUseCase
from app.application.use_cases.daily_questions import GetDailyQuestionsUseCase
from app.application.use_cases.generate_questions import GenerateQuestionsUseCase
from app.application.use_cases.memories import MemoryUseCase
from app.application.use_cases.submit_answer import SubmitAnswerUseCase
from app.application.use_cases.user_progress import GetUserProgressUseCase
from app.domain.entities.user import User
from app.infrastructure.llm.mock_llm import MockLLM
from app.infrastructure.llm.openai_llm import OpenAILLM
from app.infrastructure.security.tokens import TokenSigner
from app.infrastructure.storage.http_storage import HttpPhotoStorage
from app.infrastructure.storage.local_storage import LocalPhotoStorage
from app.infrastructure.storage.memory_storage import MemoryPhotoStorage
from app.infrastructure.store.json_store import JsonMemoraidStore
from app.infrastructure.store.memory_store import MemoryMemoraidStore


logger = logging.getLogger(__name__)


def _is_local() -> bool:
    return settings.ENV.lower() in {"dev", "local"}


@lru_cache
def get_llm() -> LLMPort:
    if settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.strip():
        return OpenAILLM()
    logger.info("OPENAI_API_KEY missing; using MockLLM")
    return MockLLM()


@lru_cache
def get_store() -> MemoraidStorePort:
    if _is_local():
        return JsonMemoraidStore(data_dir=settings.DATA_DIR)
    return MemoryMemoraidStore()


@lru_cache
def get_photo_storage() -> PhotoStoragePort:
    if settings.STORAGE_URL and settings.STORAGE_KEY:
        return HttpPhotoStorage(
            base_url=settings.STORAGE_URL,
            api_key=settings.STORAGE_KEY,
            bucket=settings.PHOTO_BUCKET,
            cache_control=settings.PHOTO_CACHE_CONTROL,
        )
    if _is_local():
        logger.info("Using LocalPhotoStorage", extra={"reason": settings.PHOTO_DIR})
        return LocalPhotoStorage(photo_dir=settings.PHOTO_DIR, base_url=settings.PHOTO_BASE_URL)
    return MemoryPhotoStorage()


@lru_cache
def get_token_signer() -> TokenSigner:
    secret = settings.JWT_SECRET
    if not secret and _is_local():
        logger.warning("JWT_SECRET missing; signing with a random per-process secret")
        secret = secrets.token_urlsafe(32)
    return TokenSigner(secret=secret or "")


def get_auth_use_case() -> AuthUseCase:
    return AuthUseCase(
        store=get_store(),
        signer=get_token_signer(),
        session_days=settings.SESSION_TOKEN_DAYS,
        share_days=settings.SHARE_TOKEN_DAYS,
    )


def get_memory_use_case() -> MemoryUseCase:
    return MemoryUseCase(
        store=get_store(),
        photos=get_photo_storage(),
        max_photo_bytes=settings.PHOTO_MAX_BYTES,
    )


def get_generate_use_case() -> GenerateQuestionsUseCase:
    return GenerateQuestionsUseCase(llm=get_llm(), store=get_store(), count=settings.QUESTIONS_PER_MEMORY)


def get_daily_use_case() -> GetDailyQuestionsUseCase:
    return GetDailyQuestionsUseCase(store=get_store(), limit=settings.DAILY_QUESTION_LIMIT)


def get_submit_answer_use_case() -> SubmitAnswerUseCase:
    return SubmitAnswerUseCase(store=get_store())


def get_progress_use_case() -> GetUserProgressUseCase:
    return GetUserProgressUseCase(store=get_store())


def get_current_user(
    authorization: str | None = Header(None),
    auth: AuthUseCase = Depends(get_auth_use_case),
) -> User:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="No token, authorization denied")

    token = authorization[len("Bearer "):]
    try:
        return auth.authenticate(token)
    except AuthenticationError:
        raise HTTPException(status_code=401, detail="Token is invalid or expired")
    except NotFoundError:
        raise HTTPException(status_code=401, detail="User not found")
