"""Abstract base class for palindrome filtering backends."""
from abc import ABC, abstractmethod
from typing import List
import numpy as np


class FilterBackend(ABC):
    """Abstract interface for parallel palindrome filtering backends.

    Each backend implements element-level parallelism over one input array.
    The driver (PalindromeFilter) validates the input and calls
    filter_batch() once per call.
    """

    @abstractmethod
    def filter_batch(self, numbers: np.ndarray) -> List[int]:
        """Select the palindromes in numbers.

        Args:
            numbers: int64 array of validated 32-bit values (never mutated)

        Returns:
            list of matching values as Python ints, in no guaranteed order.
            Duplicates in the input appear once per occurrence.
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable backend name, e.g. 'Threads (8 workers, Numba JIT)'."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this backend's libraries/threading layer are usable."""
        pass
