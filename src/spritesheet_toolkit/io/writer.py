"""
Module: io.writer

Purpose:
    Write sheets and frames to disk. Image writes are atomic (temp file in
    the target directory, then replace) so a failed encode never leaves a
    half-written file under the final name.

Key Functions:
    - ensure_directory(): Create the output directory if absent
    - write_image(): Atomic encode-and-write of one image
    - lock_file_path(): Temp-directory lock file for an output directory
    - output_lock(): Exclusive directory lock while a name is chosen

Dependencies:
    - portalocker: Cross-platform file locking
    - PIL.Image: Image saving (through io.codec)

Used By:
    - controller: Sheet output
    - io.write_queue: Background frame writes
"""

from __future__ import annotations

import hashlib
import logging
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Union

import portalocker
from PIL import Image

from spritesheet_toolkit.core.errors import OutputError
from spritesheet_toolkit.core.models import ImageFormatInfo

from .codec import save_image

logger = logging.getLogger(__name__)

LOCK_FILE_PREFIX = "spritesheet-toolkit-"


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Create a directory (and parents) if it does not exist.

    Raises:
        OutputError: If the directory cannot be created
    """
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Could not create output directory {directory}: {e}") from e
    return directory


def write_image(image: Image.Image, path: Path, image_format: ImageFormatInfo) -> Path:
    """
    Write image atomically using a temp file.

    Args:
        image: Image to write
        path: Final file path (parent directory must exist)
        image_format: Output format

    Returns:
        path

    Raises:
        EncodeError: If the codec cannot write the format
        OutputError: If the file cannot be written
    """
    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            suffix=f".{image_format.extension}",
            dir=path.parent,
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            save_image(image, f, image_format)

        # replace() overwrites existing files on all platforms
        temp_path.replace(path)
    except OSError as e:
        raise OutputError(f"Could not write {path}: {e}") from e
    finally:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()

    logger.debug(f"Wrote {path.name} ({image.width}x{image.height})")
    return path


def lock_file_path(directory: Path) -> Path:
    """
    Lock file guarding an output directory.

    The lock lives in the system temp directory, keyed by a hash of the
    resolved output path, so the output directory only ever holds images.
    """
    digest = hashlib.sha1(str(directory.resolve()).encode("utf-8")).hexdigest()[:16]
    return Path(tempfile.gettempdir()) / f"{LOCK_FILE_PREFIX}{digest}.lock"


@contextmanager
def output_lock(directory: Path) -> Generator[Path, None, None]:
    """
    Hold an exclusive lock on a directory for the duration of the block.

    Concurrent packers writing into the same directory take turns, so the
    name chosen by next_available_name() is still free when the sheet is
    written.

    Yields:
        The locked directory

    Raises:
        OutputError: If the lock file cannot be opened or locked
    """
    lock_path = lock_file_path(directory)
    try:
        handle = open(lock_path, "a", encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Could not open lock file {lock_path}: {e}") from e

    with handle:
        try:
            portalocker.lock(handle, portalocker.LOCK_EX)
        except (portalocker.exceptions.LockException, OSError) as e:
            raise OutputError(f"Could not lock output directory {directory}: {e}") from e
        try:
            yield directory
        finally:
            portalocker.unlock(handle)
