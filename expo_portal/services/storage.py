"""Document storage for submission uploads.

Files are written under ``UPLOAD_DIR`` with the key
``{owner_id}/{epoch_millis}.{ext}`` and are served back from
``UPLOAD_BASE_URL`` by the static mount in ``main``. An existing key is never
overwritten; a collision moves on to the next millisecond.
"""
import logging
import time
from pathlib import Path
from typing import Optional

from expo_portal.core.config import (
    ALLOWED_DOCUMENT_EXTENSIONS,
    MAX_UPLOAD_BYTES,
    UPLOAD_BASE_URL,
    UPLOAD_DIR,
)
from expo_portal.core.errors import StorageError

logger = logging.getLogger(__name__)

MAX_KEY_ATTEMPTS = 50


class DocumentStorage:
    def __init__(
        self,
        root: Path = UPLOAD_DIR,
        base_url: str = UPLOAD_BASE_URL,
        max_bytes: int = MAX_UPLOAD_BYTES,
        allowed_extensions: set[str] = ALLOWED_DOCUMENT_EXTENSIONS,
    ):
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")
        self.max_bytes = max_bytes
        self.allowed_extensions = allowed_extensions

    def _extension(self, filename: str) -> str:
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        if ext not in self.allowed_extensions:
            allowed = ", ".join(sorted(self.allowed_extensions))
            raise StorageError(f"Unsupported document type; allowed: {allowed}")
        return ext

    def build_key(self, owner_id: int, filename: str, stamp: Optional[int] = None) -> str:
        ext = self._extension(filename)
        if stamp is None:
            stamp = int(time.time() * 1000)
        return f"{owner_id}/{stamp}.{ext}"

    def save(self, owner_id: int, filename: str, content: bytes) -> str:
        """Store the document and return its public URL."""
        if not content:
            raise StorageError("Uploaded document is empty")
        if len(content) > self.max_bytes:
            raise StorageError(f"Document exceeds the {self.max_bytes} byte limit")

        stamp = int(time.time() * 1000)
        for _ in range(MAX_KEY_ATTEMPTS):
            key = self.build_key(owner_id, filename, stamp)
            path = self.root / key
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                with open(path, "xb") as fh:
                    fh.write(content)
            except FileExistsError:
                stamp += 1
                continue
            except OSError as exc:
                logger.error("Failed to store document %s: %s", key, exc)
                raise StorageError("Failed to store document") from exc

            logger.info("Stored document %s (%d bytes)", key, len(content))
            return f"{self.base_url}/{key}"

        logger.error("No free storage key for owner %s after %d attempts", owner_id, MAX_KEY_ATTEMPTS)
        raise StorageError("Failed to store document")

    def key_for(self, url: str) -> Optional[str]:
        prefix = f"{self.base_url}/"
        if not url.startswith(prefix):
            return None
        key = url[len(prefix):]
        # only keys this storage could have produced
        if ".." in key.split("/"):
            return None
        return key

    def delete(self, url: Optional[str]) -> bool:
        """Remove a stored document by its public URL. Returns whether a file was removed."""
        if not url:
            return False
        key = self.key_for(url)
        if key is None:
            logger.warning("Not removing %s: outside document storage", url)
            return False

        path = self.root / key
        try:
            path.unlink()
        except FileNotFoundError:
            logger.warning("Stored document %s was already gone", key)
            return False
        except OSError as exc:
            logger.error("Failed to remove document %s: %s", key, exc)
            raise StorageError("Failed to remove document") from exc

        logger.info("Removed document %s", key)
        return True


def get_storage() -> DocumentStorage:
    return DocumentStorage()
