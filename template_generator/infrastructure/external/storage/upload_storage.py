"""Local uploads directory: write incoming spreadsheets, remove them after processing."""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles
import aiofiles.os
from fastapi import UploadFile

from template_generator.infrastructure.exceptions import UploadStorageError
from template_generator.shared.utils.generators import generate_upload_filename

logger = logging.getLogger(__name__)


class UploadStorage:
    """Stores uploads under uploads_dir with unique '<ms>-<random>-<name>' file names."""

    CHUNK_SIZE = 64 * 1024  # 64KB

    def __init__(self, uploads_dir: str) -> None:
        self.uploads_dir = Path(uploads_dir).resolve()

    async def save(self, upload: UploadFile) -> Path:
        """Stream the upload to disk; return the stored path."""
        # Keep only the final path component of the client-supplied name.
        original = Path(upload.filename or "upload").name
        target = self.uploads_dir / generate_upload_filename(original)
        try:
            await aiofiles.os.makedirs(self.uploads_dir, exist_ok=True)
            async with aiofiles.open(target, "wb") as f:
                while chunk := await upload.read(self.CHUNK_SIZE):
                    await f.write(chunk)
        except OSError as e:
            raise UploadStorageError(original, str(e)) from e
        return target

    async def delete(self, path: Path) -> None:
        """Remove a stored upload; a missing file is not an error."""
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            return
        except OSError as e:
            logger.warning("Could not remove uploaded file %s: %s", path, e)
