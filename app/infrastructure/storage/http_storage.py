from __future__ import annotations

import logging

import httpx

from app.application.exceptions import StorageError
from app.application.ports.photo_storage import PhotoStoragePort


class HttpPhotoStorage(PhotoStoragePort):
    """
    Client for a Supabase-style object storage REST API.

    Uploads go to `{base_url}/storage/v1/object/{bucket}/{name}` and the
    returned URL is the bucket's public object path.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        bucket: str,
        cache_control: str = "3600",
        client: httpx.Client | None = None,
    ) -> None:
        if not base_url or not api_key:
            raise ValueError("STORAGE_URL and STORAGE_KEY are required for HTTP photo storage")
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._bucket = bucket
        self._cache_control = cache_control
        self._client = client or httpx.Client(timeout=30.0)
        self._logger = logging.getLogger(__name__)

    def public_url(self, file_name: str) -> str:
        return f"{self._base_url}/storage/v1/object/public/{self._bucket}/{file_name}"

    def upload(self, file_name: str, data: bytes, content_type: str | None) -> str:
        url = f"{self._base_url}/storage/v1/object/{self._bucket}/{file_name}"
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "apikey": self._api_key,
            "Content-Type": content_type or "application/octet-stream",
            "cache-control": f"max-age={self._cache_control}",
        }
        try:
            resp = self._client.post(url, content=data, headers=headers)
        except httpx.HTTPError as e:
            self._logger.error("Photo upload failed", extra={"reason": str(e)})
            raise StorageError(f"Storage provider unreachable: {e}") from e

        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = None
            message = (body.get("message") if isinstance(body, dict) else None) or resp.text
            self._logger.error(
                "Photo upload rejected",
                extra={"status": resp.status_code, "reason": message},
            )
            raise StorageError(f"Error uploading photo: {message}")

        return self.public_url(file_name)
