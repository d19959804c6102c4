"""
Module: io.write_queue

Purpose:
    Thread pool image writer for separated frames. Each frame goes to its
    own file, so writes never touch the same region and need no locking.

Key Classes:
    - WriteQueue: Queue image writes, then wait for all of them

Dependencies:
    - concurrent.futures: Thread pool execution
    - io.writer: Atomic image writes

Used By:
    - controller.unpack_sprite_sheet(): Frame output
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from PIL import Image

from spritesheet_toolkit.core.models import ImageFormatInfo

from .writer import write_image

logger = logging.getLogger(__name__)


class WriteQueue:
    """
    Thread pool-based write queue for image files.

    Usage:
        with WriteQueue(max_workers=4) as queue:
            for frame, path in frames:
                queue.queue_image_write(frame, path, image_format)
            paths = queue.wait_all()

    wait_all() lets every queued write finish and then re-raises the first
    failure, so a caller sees one error for the whole batch.

    Attributes:
        max_workers: Maximum concurrent write threads. 0 writes synchronously.
    """

    def __init__(self, max_workers: int = 4):
        self.max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = (
            ThreadPoolExecutor(max_workers=max_workers) if max_workers > 0 else None
        )
        self._futures: List[Future] = []

    def queue_image_write(
        self,
        image: Image.Image,
        path: Path,
        image_format: ImageFormatInfo,
    ) -> Future:
        """
        Queue an image write operation.

        Returns:
            Future resolving to the written path
        """
        if self._executor is None:
            future: Future = Future()
            try:
                future.set_result(write_image(image, path, image_format))
            except Exception as e:
                future.set_exception(e)
        else:
            future = self._executor.submit(write_image, image, path, image_format)
        self._futures.append(future)
        return future

    def wait_all(self) -> List[Path]:
        """
        Wait for all queued writes to complete.

        Returns:
            Written paths in the order they were queued

        Raises:
            The first write failure, after every write has settled
        """
        paths: List[Path] = []
        first_error: Optional[BaseException] = None
        for future in self._futures:
            error = future.exception()
            if error is None:
                paths.append(future.result())
                continue
            logger.error(f"Write failed: {error}")
            if first_error is None:
                first_error = error
        self._futures.clear()

        if first_error is not None:
            raise first_error
        return paths

    def shutdown(self) -> None:
        """Shutdown the thread pool, waiting for outstanding writes."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "WriteQueue":
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()
