from __future__ import annotations

from app.application.ports.photo_storage import PhotoStoragePort


class MemoryPhotoStorage(PhotoStoragePort):
    def __init__(self, base_url: str = "https://storage.test/memory-photos") -> None:
        self._base_url = base_url.rstrip("/")
        self.objects: dict[str, tuple[bytes, str | None]] = {}

    def upload(self, file_name: str, data: bytes, content_type: str | None) -> str:
        self.objects[file_name] = (bytes(data), content_type)
        return f"{self._base_url}/{file_name}"
