from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from pathlib import Path

import aiofiles

from versepost.utils.exceptions import UploadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredFile:
    fieldname: str
    originalname: str | None
    filename: str
    path: Path
    size: int


class UploadService:
    """Writes uploaded files into one directory under random names.

    Stored names are 32 hex characters with no extension, so nothing from the
    client ends up in the path.
    """

    def __init__(self, upload_dir: str | Path) -> None:
        self.upload_dir = Path(upload_dir).resolve()

    async def store(self, fieldname: str, originalname: str | None, content: bytes) -> StoredFile:
        filename = secrets.token_hex(16)
        path = self.upload_dir / filename
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store upload at %s: %s", path, e)
            raise UploadError(f"Failed to store uploaded file '{originalname}'") from e

        stored = StoredFile(
            fieldname=fieldname,
            originalname=originalname,
            filename=filename,
            path=path,
            size=len(content),
        )
        logger.info("Stored upload %s as %s (%d bytes)", originalname, filename, stored.size)
        return stored
