from abc import ABC, abstractmethod


class PhotoStoragePort(ABC):
    @abstractmethod
    def upload(self, file_name: str, data: bytes, content_type: str | None) -> str:
        """
        Store a photo under `file_name` and return its public URL.

        Raises:
            StorageError: the provider rejected the upload or could not be reached
        """
        raise NotImplementedError
