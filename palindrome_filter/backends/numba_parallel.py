"""
Numba Backend: one @njit(parallel=True) kernel

The whole array is evaluated by a prange loop on Numba's threading
layer. Every iteration writes its own mask slot; the mask then selects
the matches in a single vectorised step.
"""
import logging
from typing import List, Optional

import numba
import numpy as np

from ..kernels import palindrome_mask_parallel
from .base import FilterBackend

logger = logging.getLogger(__name__)


class NumbaBackend(FilterBackend):
    """Numba prange palindrome filtering backend.

    Parameters
    ----------
    n_threads : int or None
        Numba threads to use.  ``None`` -> Numba's configured default.
        Clamped to ``numba.config.NUMBA_NUM_THREADS``.
    """

    def __init__(self, n_threads: Optional[int] = None):
        if n_threads is not None:
            n_threads = max(1, min(n_threads, numba.config.NUMBA_NUM_THREADS))
        self._n_threads = n_threads

    def filter_batch(self, numbers: np.ndarray) -> List[int]:
        if len(numbers) == 0:
            return []
        logger.debug("evaluating %d values with prange", len(numbers))
        if self._n_threads is None:
            mask = palindrome_mask_parallel(np.ascontiguousarray(numbers))
        else:
            previous = numba.get_num_threads()
            numba.set_num_threads(self._n_threads)
            try:
                mask = palindrome_mask_parallel(np.ascontiguousarray(numbers))
            finally:
                numba.set_num_threads(previous)
        return numbers[mask].tolist()

    def get_name(self) -> str:
        n = self._n_threads or numba.config.NUMBA_NUM_THREADS
        return f"Numba prange ({n} thread{'s' if n > 1 else ''})"

    def is_available(self) -> bool:
        return True  # prange degrades to a serial loop on one thread
