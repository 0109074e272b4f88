"""
Process Backend: multiprocessing Pool

Parallelization strategy:
- Split the input array into n_workers chunks
- Each worker process selects the palindromes of its chunk
- Partial results are merged in completion order (imap_unordered)

Useful when the pure-Python reference path is selected, where threads
would serialise on the GIL.
"""
import logging
from multiprocessing import Pool, cpu_count
from typing import List, Optional

import numpy as np

from .base import FilterBackend
from .threads import select_chunk

logger = logging.getLogger(__name__)


# ===================================================================
# Multiprocessing worker function (top-level for pickle)
# ===================================================================

def _worker_select(args):
    """Worker function executed in each Pool process.

    Receives a plain int64 array and the JIT toggle.
    Returns the chunk's palindromes as a list of ints.
    """
    chunk, use_numba = args
    return select_chunk(chunk, use_numba)


class ProcessBackend(FilterBackend):
    """Process-pool palindrome filtering backend.

    Parameters
    ----------
    n_workers : int or None
        Number of worker processes.  ``None`` -> ``os.cpu_count()``.
    use_numba : bool
        If True (default), workers use the JIT kernel.
    """

    def __init__(self, n_workers: Optional[int] = None, use_numba: bool = True):
        if n_workers is None:
            n_workers = cpu_count() or 1
        self._n_workers = max(1, n_workers)
        self._use_numba = use_numba

    def filter_batch(self, numbers: np.ndarray) -> List[int]:
        if len(numbers) == 0:
            return []

        n_chunks = min(self._n_workers, len(numbers))
        worker_args = [
            (np.ascontiguousarray(chunk), self._use_numba)
            for chunk in np.array_split(numbers, n_chunks)
        ]

        # Dispatch
        if self._n_workers == 1:
            return _worker_select(worker_args[0])

        logger.debug("dispatching %d chunks to %d processes", len(worker_args), self._n_workers)

        palindromes = []
        with Pool(processes=self._n_workers) as pool:
            for partial in pool.imap_unordered(_worker_select, worker_args):
                palindromes.extend(partial)
        return palindromes

    def get_name(self) -> str:
        n = self._n_workers
        mode = "Numba JIT" if self._use_numba else "pure-Python"
        return f"Processes ({n} worker{'s' if n > 1 else ''}, {mode})"

    def is_available(self) -> bool:
        return True  # CPU is always available
