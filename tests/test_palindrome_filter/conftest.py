"""
Shared pytest fixtures for palindrome_filter test suite.
"""
import numpy as np
import pytest

from palindrome_filter.backends.threads import ThreadBackend
from palindrome_filter.backends.processes import ProcessBackend
from palindrome_filter.backends.numba_parallel import NumbaBackend


def reference_is_palindrome(n):
    """String-reversal oracle, used only to check the arithmetic predicate."""
    return n >= 0 and str(n) == str(n)[::-1]


@pytest.fixture
def rng():
    """Numpy Generator with fixed seed for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_numbers(rng):
    """5000 values spread over the whole 32-bit range, plus small values
    so that palindromes are actually present."""
    wide = rng.integers(-2**31, 2**31, size=4000, dtype=np.int64)
    small = rng.integers(-1000, 100000, size=1000, dtype=np.int64)
    return np.concatenate([wide, small])


@pytest.fixture
def thread_backend():
    """ThreadBackend with 2 workers and small chunks to force a real fan-out."""
    return ThreadBackend(n_workers=2, chunk_size=64)


@pytest.fixture
def process_backend():
    """ProcessBackend with 2 worker processes."""
    return ProcessBackend(n_workers=2)


@pytest.fixture
def numba_backend():
    """NumbaBackend with Numba's default thread count."""
    return NumbaBackend()


@pytest.fixture(params=['thread', 'process', 'numba'])
def any_backend(request, thread_backend, process_backend, numba_backend):
    """Each backend in turn."""
    return {
        'thread': thread_backend,
        'process': process_backend,
        'numba': numba_backend,
    }[request.param]
