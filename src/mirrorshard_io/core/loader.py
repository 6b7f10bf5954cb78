"""
DocumentLoader for decoding many files on a worker pool.

Uses ThreadPoolExecutor so disk reads never block the caller's interactive
thread, with independent failure handling per file.
"""

import concurrent.futures
import time
from collections.abc import Callable, Iterable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from mirrorshard_io.constants import DEFAULT_MAX_WORKERS
from mirrorshard_io.core.decoder import read_document
from mirrorshard_io.core.errors import ReadFailureError, UnsupportedEncodingError
from mirrorshard_io.models.document import DecodedDocument
from mirrorshard_io.utils.app_logger import get_logger

logger = get_logger(__name__)


class LoadStatus(str, Enum):
    """Outcome of loading a single file."""

    SUCCESS = "success"
    UNSUPPORTED_ENCODING = "unsupported_encoding"
    READ_ERROR = "read_error"


class LoadResult(BaseModel):
    """Result of loading one file.

    Attributes:
        path: File that was loaded
        status: Outcome of the load
        document: Decoded document on success
        error_message: Failure description otherwise
        elapsed_ms: Time spent reading and decoding
    """

    path: Path
    status: LoadStatus
    document: DecodedDocument | None = None
    error_message: str | None = None
    elapsed_ms: float = Field(default=0.0, ge=0.0)

    @property
    def ok(self) -> bool:
        return self.status == LoadStatus.SUCCESS


class DocumentLoader:
    """
    Loads documents in parallel.

    Each path is read and decoded on its own worker; a failure for one path
    is reported in that path's result and does not affect the others.
    """

    def __init__(self, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        """
        Initialize DocumentLoader.

        Args:
            max_workers: Maximum number of files loaded concurrently
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.max_workers = max_workers

    def load_many(
        self,
        paths: Iterable[str | Path],
        progress_callback: Callable[[LoadResult], None] | None = None,
    ) -> list[LoadResult]:
        """
        Load and decode every path.

        Args:
            paths: Files to load
            progress_callback: Optional callable invoked as each file completes

        Returns:
            One LoadResult per path, in input order
        """
        path_list = [Path(p) for p in paths]
        results: dict[int, LoadResult] = {}

        with concurrent.futures.ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_index = {
                executor.submit(self._load_single, path): index
                for index, path in enumerate(path_list)
            }

            for future in concurrent.futures.as_completed(future_to_index):
                index = future_to_index[future]
                try:
                    result = future.result()
                except Exception as e:
                    result = LoadResult(
                        path=path_list[index],
                        status=LoadStatus.READ_ERROR,
                        error_message=f"Failed to retrieve result: {e}",
                    )
                results[index] = result
                self._notify_progress(progress_callback, result)

        ordered = [results[index] for index in range(len(path_list))]
        failed = sum(1 for r in ordered if not r.ok)
        logger.info(f"Loaded {len(ordered) - failed}/{len(ordered)} file(s)")
        return ordered

    def _load_single(self, path: Path) -> LoadResult:
        """Read and decode one file, converting expected failures into a result."""
        start = time.perf_counter()
        try:
            document = read_document(path)
        except UnsupportedEncodingError as e:
            return LoadResult(
                path=path,
                status=LoadStatus.UNSUPPORTED_ENCODING,
                error_message=str(e),
                elapsed_ms=(time.perf_counter() - start) * 1000,
            )
        except ReadFailureError as e:
            return LoadResult(
                path=path,
                status=LoadStatus.READ_ERROR,
                error_message=str(e),
                elapsed_ms=(time.perf_counter() - start) * 1000,
            )

        return LoadResult(
            path=path,
            status=LoadStatus.SUCCESS,
            document=document,
            elapsed_ms=(time.perf_counter() - start) * 1000,
        )

    @staticmethod
    def _notify_progress(
        callback: Callable[[LoadResult], None] | None,
        result: LoadResult,
    ) -> None:
        if callback is None:
            return
        try:
            callback(result)
        except Exception as e:
            logger.debug(f"Progress callback raised: {e}")
