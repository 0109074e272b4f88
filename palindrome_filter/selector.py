"""
Palindrome selection driver.

1. Validate the input collection (present, integers, signed 32-bit range)
2. Copy it into a fresh int64 array (the caller's collection is never touched)
3. Hand the array to a FilterBackend, which fans out over worker
   threads/processes and collects matches in a shared accumulator
4. Return the matches as a bag (list, no ordering guarantee)
"""
import time
from dataclasses import dataclass
from typing import List

import numpy as np

from .constants import INT32_MIN, INT32_MAX
from .exceptions import InvalidArgumentError


def validate_numbers(numbers) -> np.ndarray:
    """Check numbers and return them as a new 1-D int64 array.

    Raises:
        InvalidArgumentError if numbers is None, is not iterable, or holds
        anything other than integers in [INT32_MIN, INT32_MAX]
    """
    if numbers is None:
        raise InvalidArgumentError("numbers must not be None")

    if isinstance(numbers, np.ndarray):
        if numbers.dtype.kind not in 'iu':
            raise InvalidArgumentError(f"expected an integer array, got dtype {numbers.dtype}")
        if numbers.size and (int(numbers.min()) < INT32_MIN or int(numbers.max()) > INT32_MAX):
            raise InvalidArgumentError("array holds values outside the signed 32-bit range")
        return numbers.astype(np.int64).reshape(-1)

    try:
        values = list(numbers)
    except TypeError as e:
        raise InvalidArgumentError(f"numbers must be iterable, got {type(numbers).__name__}") from e

    for value in values:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise InvalidArgumentError(f"{value!r} is not an integer")
        if not INT32_MIN <= value <= INT32_MAX:
            raise InvalidArgumentError(f"{value} is outside the signed 32-bit range")

    return np.array(values, dtype=np.int64)


@dataclass
class FilterResult:
    """Palindromes selected by one run, with timing."""
    palindromes: List[int]
    n_input: int
    n_palindromes: int
    backend_name: str
    total_time: float               # seconds

    def summary(self):
        """Print human-readable summary."""
        print("=" * 60)
        print(f"  Palindrome Filter Result ({self.backend_name})")
        print("=" * 60)
        print(f"  Input numbers: {self.n_input:,}")
        print(f"  Palindromes:   {self.n_palindromes:,}")
        if self.n_input > 0:
            print(f"  Fraction:      {self.n_palindromes / self.n_input:.6f}")
        print(f"  Wall time: {self.total_time:.3f} s")
        if self.total_time > 0:
            print(f"  Rate: {self.n_input / self.total_time:,.0f} numbers/s")
        print("=" * 60)

    def to_dict(self):
        """Convert to JSON-serializable dict."""
        return {
            'palindromes': [int(p) for p in self.palindromes],
            'n_input': self.n_input,
            'n_palindromes': self.n_palindromes,
            'backend_name': self.backend_name,
            'total_time': float(self.total_time),
        }


class PalindromeFilter:
    """Selects decimal palindromes from integer collections.

    Uses any FilterBackend for the parallel evaluation. Holds no state
    between calls beyond the backend configuration.
    """

    def __init__(self, backend=None):
        if backend is None:
            from .backends import auto_select_backend
            backend = auto_select_backend()
        self.backend = backend

    def filter(self, numbers) -> List[int]:
        """Palindromes in numbers, in no guaranteed order.

        Raises:
            InvalidArgumentError for a None or invalid collection
        """
        values = validate_numbers(numbers)
        return self.backend.filter_batch(values)

    def run(self, numbers, verbose=False) -> FilterResult:
        """Filter numbers and return a timed FilterResult."""
        values = validate_numbers(numbers)

        if verbose:
            print(f"Starting palindrome selection")
            print(f"  Backend: {self.backend.get_name()}")
            print(f"  Numbers: {len(values):,}")
            print()

        t_start = time.time()
        palindromes = self.backend.filter_batch(values)
        total_time = time.time() - t_start

        result = FilterResult(
            palindromes=palindromes,
            n_input=len(values),
            n_palindromes=len(palindromes),
            backend_name=self.backend.get_name(),
            total_time=total_time,
        )

        if verbose:
            result.summary()

        return result


def get_palindromes(numbers, backend=None) -> List[int]:
    """Palindromes in numbers using backend (auto-selected when None)."""
    return PalindromeFilter(backend=backend).filter(numbers)
