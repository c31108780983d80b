import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api.v1.auth import router as auth_router
from app.api.v1.memories import router as memories_router
from app.api.v1.questions import router as questions_router
from app.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("user_id", "memory_id", "question_id", "is_correct", "points", "status", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Memoraid", version="1.0.0")

app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
app.include_router(memories_router, prefix="/api/memories", tags=["memories"])
app.include_router(questions_router, prefix="/api/questions", tags=["questions"])

if settings.ENV.lower() in {"dev", "local"} and not settings.STORAGE_URL:
    app.mount("/photos", StaticFiles(directory=settings.PHOTO_DIR, check_dir=False), name="photos")


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
