"""Errors raised by palindrome_filter."""


class InvalidArgumentError(ValueError):
    """Input collection is missing or holds a value that is not a 32-bit integer."""


class InvariantViolationError(RuntimeError):
    """A digit position fell outside [0, digit_count). Indicates a logic fault."""
