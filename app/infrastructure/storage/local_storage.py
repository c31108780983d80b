from __future__ import annotations

import logging
from pathlib import Path

from app.application.exceptions import StorageError
from app.application.ports.photo_storage import PhotoStoragePort


class LocalPhotoStorage(PhotoStoragePort):
    """Writes photos under a directory that the app serves at `base_url`."""

    def __init__(self, photo_dir: str, base_url: str) -> None:
        self._photo_dir = Path(photo_dir)
        self._photo_dir.mkdir(parents=True, exist_ok=True)
        self._base_url = base_url.rstrip("/")
        self._logger = logging.getLogger(__name__)

    def upload(self, file_name: str, data: bytes, content_type: str | None) -> str:
        target = self._photo_dir / Path(file_name).name
        try:
            target.write_bytes(data)
        except OSError as e:
            self._logger.error("Photo write failed", extra={"reason": str(e)})
            raise StorageError(f"Could not store photo: {e}") from e
        return f"{self._base_url}/{target.name}"
