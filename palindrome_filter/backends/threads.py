"""
Thread Backend: ThreadPoolExecutor + nogil Numba JIT

Parallelization strategy:
- Split the input array into chunks (several per worker)
- Each worker selects the palindromes of its chunk
- Matches are put into one shared queue.SimpleQueue
- The queue is drained into the result list once every worker is done

The JIT kernel releases the GIL, so chunks are evaluated concurrently
on all cores without process start-up or pickling cost.
"""
import logging
import math
import os
import queue
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional

import numpy as np

from ..constants import MIN_CHUNK_SIZE
from ..digits import select_palindromes
from ..kernels import palindrome_mask_jit
from .base import FilterBackend

logger = logging.getLogger(__name__)


def select_chunk(chunk: np.ndarray, use_numba: bool) -> List[int]:
    """Palindromes of one chunk, via the JIT kernel or the reference path."""
    if use_numba:
        return chunk[palindrome_mask_jit(chunk)].tolist()
    return select_palindromes(chunk)


class ThreadBackend(FilterBackend):
    """Thread-pool palindrome filtering backend.

    Parameters
    ----------
    n_workers : int or None
        Number of worker threads.  ``None`` -> ``os.cpu_count()``.
    use_numba : bool
        If True (default), evaluate chunks with the nogil JIT kernel;
        otherwise with the pure-Python reference helpers.
    chunk_size : int or None
        Elements per task.  ``None`` -> about four chunks per worker,
        never below MIN_CHUNK_SIZE.
    """

    def __init__(self, n_workers: Optional[int] = None, use_numba: bool = True,
                 chunk_size: Optional[int] = None):
        if n_workers is None:
            n_workers = os.cpu_count() or 1
        self._n_workers = max(1, n_workers)
        self._use_numba = use_numba
        self._chunk_size = chunk_size

    # ------------------------------------------------------------------
    # FilterBackend interface
    # ------------------------------------------------------------------

    def filter_batch(self, numbers: np.ndarray) -> List[int]:
        if len(numbers) == 0:
            return []

        chunks = self._split(numbers)
        matches = queue.SimpleQueue()

        def work(chunk):
            for value in select_chunk(chunk, self._use_numba):
                matches.put(value)

        logger.debug("dispatching %d chunks to %d threads", len(chunks), self._n_workers)

        with ThreadPoolExecutor(max_workers=self._n_workers) as pool:
            futures = [pool.submit(work, chunk) for chunk in chunks]
            try:
                for future in as_completed(futures):
                    future.result()
            except Exception:
                for future in futures:
                    future.cancel()
                raise

        palindromes = []
        while not matches.empty():
            palindromes.append(matches.get_nowait())
        return palindromes

    def get_name(self) -> str:
        n = self._n_workers
        mode = "Numba JIT" if self._use_numba else "pure-Python"
        return f"Threads ({n} worker{'s' if n > 1 else ''}, {mode})"

    def is_available(self) -> bool:
        return True  # threads are always available

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _split(self, numbers: np.ndarray) -> List[np.ndarray]:
        """Split numbers into contiguous views of roughly chunk_size elements."""
        n = len(numbers)
        chunk_size = self._chunk_size
        if chunk_size is None:
            chunk_size = max(MIN_CHUNK_SIZE, math.ceil(n / (4 * self._n_workers)))
        n_chunks = max(1, math.ceil(n / max(1, chunk_size)))
        return np.array_split(numbers, n_chunks)
