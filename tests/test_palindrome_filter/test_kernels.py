"""
Tests for palindrome_filter.kernels module (Numba JIT kernels).
"""
import numpy as np
import pytest

from palindrome_filter.constants import INT32_MIN, INT32_MAX
from palindrome_filter.digits import digit_count, is_palindrome
from palindrome_filter.kernels import (
    digit_count_jit,
    digit_at_jit,
    is_palindrome_jit,
    palindrome_mask_jit,
    palindrome_mask_parallel,
)


class TestScalarKernels:
    @pytest.mark.parametrize("number", [0, 9, 10, 99, 100, 123456, 1_000_000_000, INT32_MAX, -5, INT32_MIN])
    def test_digit_count_matches_reference(self, number):
        assert digit_count_jit(number) == digit_count(number)

    def test_digit_at(self):
        assert [digit_at_jit(4071, p) for p in range(4)] == [1, 7, 0, 4]

    def test_is_palindrome_matches_reference(self, random_numbers):
        for n in random_numbers:
            assert bool(is_palindrome_jit(n)) == is_palindrome(n), n

    def test_negatives_rejected(self):
        assert not is_palindrome_jit(-121)
        assert not is_palindrome_jit(INT32_MIN)


class TestMaskKernels:
    def test_serial_mask_matches_reference(self, random_numbers):
        mask = palindrome_mask_jit(random_numbers)
        expected = np.array([is_palindrome(n) for n in random_numbers])
        assert mask.dtype == np.bool_
        np.testing.assert_array_equal(mask, expected)

    def test_parallel_mask_matches_serial(self, random_numbers):
        np.testing.assert_array_equal(
            palindrome_mask_parallel(random_numbers),
            palindrome_mask_jit(random_numbers),
        )

    def test_empty_array(self):
        empty = np.zeros(0, dtype=np.int64)
        assert palindrome_mask_jit(empty).shape == (0,)
        assert palindrome_mask_parallel(empty).shape == (0,)

    def test_counts_five_digit_range(self):
        """0..99999 holds 10 + 9 + 90 + 90 + 900 palindromes."""
        numbers = np.arange(100000, dtype=np.int64)
        assert int(palindrome_mask_parallel(numbers).sum()) == 1099

    def test_input_not_mutated(self, random_numbers):
        before = random_numbers.copy()
        palindrome_mask_parallel(random_numbers)
        np.testing.assert_array_equal(random_numbers, before)
