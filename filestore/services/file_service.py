"""File service: list, fetch, store and remove files in the store directory."""

import os
import shutil
import stat
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Tuple

from common.constants import STREAM_PIECE_SIZE_BYTES
from common.logging_config import get_logger
from common.types import FileEntry, UploadPart
from filestore.exceptions import (
    BadRequestError,
    InvalidFileNameError,
    IOFailureError,
    StoredFileNotFoundError,
    UnsupportedMediaTypeError,
)
from filestore.mime import is_servable, lookup_mime

logger = get_logger(__name__)


def validate_file_name(file_name: str) -> str:
    """
    Check that a client-supplied name refers to a direct child of the store.

    Args:
        file_name: Name as received from the client

    Returns:
        The unchanged file name

    Raises:
        InvalidFileNameError: If the name is empty, a dot segment, or contains
            a path separator or NUL byte
    """
    if (
        not file_name
        or file_name in (".", "..")
        or "/" in file_name
        or "\\" in file_name
        or "\x00" in file_name
    ):
        raise InvalidFileNameError("Invalid file name")
    return file_name


def _iter_file(handle: BinaryIO, size: int, piece_size: int) -> Iterator[bytes]:
    """
    Stream at most size bytes from an open file, closing it when done.

    The limit keeps the body consistent with the Content-Length taken from stat
    if the file grows while it is being read.
    """
    remaining = size
    try:
        while remaining > 0:
            piece = handle.read(min(piece_size, remaining))
            if not piece:
                break
            remaining -= len(piece)
            yield piece
    except OSError as e:
        logger.error(f"Failed while streaming {handle.name}: {e}", exc_info=True)
        raise IOFailureError(f"Failed while streaming {handle.name}") from e
    finally:
        handle.close()


class FileStoreService:
    """
    Stateless facade over one flat directory of files.
    """

    def __init__(
        self,
        store_directory,
        staging_directory=None,
        piece_size: int = STREAM_PIECE_SIZE_BYTES,
    ):
        self.store_directory = Path(store_directory)
        self.staging_directory = Path(staging_directory) if staging_directory else None
        self.piece_size = piece_size

    def ensure_directory(self) -> None:
        """
        Create the store directory if it is missing and check it is usable.

        Raises:
            IOFailureError: If the directory cannot be created, read or written
        """
        try:
            self.store_directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailureError(f"Cannot create store directory {self.store_directory}: {e}") from e

        if not self.is_ready():
            raise IOFailureError(f"Store directory {self.store_directory} is not readable and writable")

        logger.info(f"Using store directory {self.store_directory.resolve()}")

    def is_ready(self) -> bool:
        """Whether the store directory exists and can be listed and written."""
        return self.store_directory.is_dir() and os.access(
            self.store_directory, os.R_OK | os.W_OK | os.X_OK
        )

    def resolve_path(self, file_name: str) -> Path:
        """Map a validated file name to its path inside the store directory."""
        return self.store_directory / validate_file_name(file_name)

    def _build_entry(self, path: Path, stat_result: Optional[os.stat_result] = None) -> FileEntry:
        if stat_result is None:
            stat_result = path.stat()
        return FileEntry(
            file_name=path.name,
            size=stat_result.st_size,
            updated_at=datetime.fromtimestamp(stat_result.st_mtime, tz=timezone.utc),
            mime=lookup_mime(path.name),
        )

    def list_files(self) -> List[FileEntry]:
        """
        List the regular files in the store directory.

        Returns:
            FileEntry per file, in directory enumeration order

        Raises:
            IOFailureError: If the directory cannot be read or a file vanishes
                between enumeration and stat
        """
        try:
            with os.scandir(self.store_directory) as entries:
                names = [entry.name for entry in entries if entry.is_file(follow_symlinks=False)]
            return [self._build_entry(self.store_directory / name) for name in names]
        except OSError as e:
            raise IOFailureError(f"Failed to list {self.store_directory}: {e}") from e

    def open_file(self, file_name: str) -> Tuple[FileEntry, Iterator[bytes]]:
        """
        Open a text or image file for streaming.

        Args:
            file_name: Name of the file in the store directory

        Returns:
            Tuple of the file's FileEntry and an iterator over its bytes

        Raises:
            InvalidFileNameError: If the name escapes the store directory
            UnsupportedMediaTypeError: If the MIME family is not text or image
            StoredFileNotFoundError: If no regular file has this name
            IOFailureError: On any other filesystem error
        """
        path = self.resolve_path(file_name)

        mime = lookup_mime(file_name)
        if not is_servable(mime):
            raise UnsupportedMediaTypeError(mime)

        try:
            stat_result = path.lstat()
            if not stat.S_ISREG(stat_result.st_mode):
                raise StoredFileNotFoundError(f"File {file_name} not found")
            handle = open(path, 'rb')
        except FileNotFoundError as e:
            raise StoredFileNotFoundError(f"File {file_name} not found") from e
        except OSError as e:
            raise IOFailureError(f"Failed to open {path}: {e}") from e

        entry = self._build_entry(path, stat_result)
        logger.debug(f"Streaming {path} ({entry.mime}, {entry.size} bytes)")
        return entry, _iter_file(handle, entry.size, self.piece_size)

    def store_files(self, parts: List[UploadPart]) -> List[FileEntry]:
        """
        Copy staged uploads into the store directory.

        Existing files with the same name are overwritten. A symlink with the same
        name is replaced by a regular file rather than written through. Staging files are
        removed afterwards, whether or not the batch succeeded. Files copied
        before a failure are left in place.

        Args:
            parts: Uploaded files waiting in the staging area

        Returns:
            FileEntry for each stored file, in upload order

        Raises:
            BadRequestError: If there are no parts
            InvalidFileNameError: If a part's name escapes the store directory
            IOFailureError: If a copy or stat fails
        """
        if not parts:
            raise BadRequestError("No files to upload")

        try:
            targets = [self.resolve_path(part.file_name) for part in parts]

            for part, target in zip(parts, targets):
                try:
                    if target.is_symlink():
                        target.unlink()
                    shutil.copyfile(part.staging_path, target)
                except OSError as e:
                    raise IOFailureError(f"Failed to store {target}: {e}") from e
                logger.info(f"Stored file {target.name}")

            try:
                return [self._build_entry(target) for target in targets]
            except OSError as e:
                raise IOFailureError(f"Failed to stat stored files: {e}") from e
        finally:
            for part in parts:
                discard_staging_file(part.staging_path)

    def remove_file(self, file_name: Optional[str]) -> None:
        """
        Delete a file from the store directory.

        There is no existence check; the filesystem error is reported as is.

        Raises:
            BadRequestError: If no name is given
            InvalidFileNameError: If the name escapes the store directory
            IOFailureError: If the delete fails, including for a missing file
        """
        if not file_name:
            raise BadRequestError("No files to remove")

        path = self.resolve_path(file_name)
        try:
            path.unlink()
        except OSError as e:
            raise IOFailureError(f"Failed to remove {path}: {e}") from e

        logger.info(f"Removed file {file_name}")


def discard_staging_file(staging_path: Path) -> None:
    """Delete a staging file, logging instead of raising if that fails."""
    try:
        Path(staging_path).unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not remove staging file {staging_path}: {e}")
