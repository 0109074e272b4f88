"""
Numeric bounds and decimal place values.
Numbers are signed 32-bit integers; digits are base 10.
"""
import numpy as np

# ---------------------------------------------------------------------------
# Signed 32-bit range
# ---------------------------------------------------------------------------
INT32_MIN = -2147483648
INT32_MAX = 2147483647

# ---------------------------------------------------------------------------
# Decimal structure
# ---------------------------------------------------------------------------
RADIX = 10
MAX_DIGITS = 10                   # |INT32_MIN| = 2147483648 has 10 digits

# 10**p for decimal place p = 0..MAX_DIGITS-1
POWERS_OF_TEN = np.array([RADIX ** p for p in range(MAX_DIGITS)], dtype=np.int64)

# DIGIT_THRESHOLDS[i] is the smallest magnitude with MAX_DIGITS - i digits,
# scanned largest first (10**9 down to 10)
DIGIT_THRESHOLDS = POWERS_OF_TEN[:0:-1].copy()

# ---------------------------------------------------------------------------
# Work splitting
# ---------------------------------------------------------------------------
MIN_CHUNK_SIZE = 1024             # smallest chunk handed to a thread worker
