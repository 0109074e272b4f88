"""
palindrome_filter - Parallel selection of decimal palindromes
from collections of signed 32-bit integers

Three parallelization backends:
  - Threads: ThreadPoolExecutor + nogil Numba JIT kernel
  - Processes: multiprocessing Pool over input chunks
  - Numba: single parallel prange kernel

Digits are compared arithmetically (division/modulus by 10),
never through string conversion.
"""
from .exceptions import InvalidArgumentError, InvariantViolationError
from .digits import digit_count, digit_at, is_palindrome
from .selector import PalindromeFilter, FilterResult, get_palindromes

__version__ = "0.1.0"

__all__ = [
    'InvalidArgumentError',
    'InvariantViolationError',
    'digit_count',
    'digit_at',
    'is_palindrome',
    'PalindromeFilter',
    'FilterResult',
    'get_palindromes',
]
