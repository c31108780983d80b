from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass
from pathlib import PurePosixPath

from app.application.exceptions import ForbiddenError, NotFoundError
from app.application.ports.memoraid_store import MemoraidStorePort
from app.application.ports.photo_storage import PhotoStoragePort
from app.domain.entities.memory import Contributor, Memory, MemoryView


logger = logging.getLogger(__name__)


MAX_PHOTO_BYTES = 5 * 1024 * 1024

_EXTENSION = re.compile(r"[A-Za-z0-9]{1,10}")


def photo_file_name(original_name: str | None) -> str:
    """`<uuid4>.<extension>`, or a bare uuid when the client name has no plain extension."""
    extension = PurePosixPath(original_name or "").suffix.lstrip(".")
    if not _EXTENSION.fullmatch(extension):
        return str(uuid.uuid4())
    return f"{uuid.uuid4()}.{extension}"


def parse_relationship_years(value: int | float | str | None) -> int:
    try:
        years = int(str(value).strip())
    except ValueError:
        raise ValueError("Relationship years must be a whole number")
    if years < 0:
        raise ValueError("Relationship years must be a whole number")
    return years


@dataclass
class MemoryUseCase:
    store: MemoraidStorePort
    photos: PhotoStoragePort
    max_photo_bytes: int = MAX_PHOTO_BYTES

    def create_contributor(
        self,
        name: str | None,
        email: str | None,
        relationship_type: str | None,
        relationship_years: int | float | str | None,
        user_id: str | None,
    ) -> Contributor:
        if not name or not email or not relationship_type or relationship_years in (None, "") or not user_id:
            raise ValueError(
                "Name, email, relationship type, relationship years, and user ID are required"
            )

        years = parse_relationship_years(relationship_years)

        if self.store.get_user(user_id) is None:
            raise NotFoundError("User not found")

        contributor = self.store.create_contributor(
            user_id=user_id,
            name=name,
            email=email,
            relationship_type=relationship_type,
            relationship_years=years,
        )
        logger.info("Contributor created", extra={"user_id": user_id})
        return contributor

    def upload_photo(self, original_name: str | None, data: bytes, content_type: str | None) -> str:
        if not data:
            raise ValueError("No file uploaded")
        if len(data) > self.max_photo_bytes:
            raise ValueError(f"File size should not exceed {self.max_photo_bytes // (1024 * 1024)}MB")

        file_name = photo_file_name(original_name)
        url = self.photos.upload(file_name=file_name, data=data, content_type=content_type)
        logger.info("Photo uploaded", extra={"reason": file_name})
        return url

    def create_memory(
        self,
        contributor_id: str | None,
        photo_url: str | None,
        description: str | None,
        event_date: str | None = None,
    ) -> Memory:
        if not contributor_id or not photo_url or not description:
            raise ValueError("Contributor ID, photo URL, and description are required")

        if self.store.get_contributor(contributor_id) is None:
            raise NotFoundError("Contributor not found")

        memory = self.store.create_memory(
            contributor_id=contributor_id,
            photo_url=photo_url,
            description=description,
            event_date=event_date or None,
        )
        logger.info("Memory created", extra={"memory_id": memory.id})
        return memory

    def get_user_memories(self, user_id: str) -> list[MemoryView]:
        contributor_ids = self.store.list_contributor_ids(user_id)
        if not contributor_ids:
            return []
        return self.store.list_memory_views(contributor_ids)

    def get_memory(self, memory_id: str) -> MemoryView:
        view = self.store.get_memory_view(memory_id)
        if view is None:
            raise NotFoundError("Memory not found")
        return view

    def delete_memory(self, memory_id: str, requesting_user_id: str) -> None:
        view = self.get_memory(memory_id)
        if view.user_id != requesting_user_id:
            raise ForbiddenError("Not authorized to delete this memory")

        self.store.delete_memory(memory_id)
        logger.info("Memory deleted", extra={"memory_id": memory_id, "user_id": requesting_user_id})
