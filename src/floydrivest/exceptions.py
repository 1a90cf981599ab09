"""Exception hierarchy for floydrivest.

All exceptions derive from FloydRivestError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class FloydRivestError(Exception):
    """Base exception for all floydrivest errors."""


class InvalidRangeError(FloydRivestError, IndexError):
    """A rank or index window falls outside the buffer.

    Raised before the buffer is touched when the buffer is empty or not
    one-dimensional, or when the target rank, ``left`` or ``right`` lie
    outside the valid index space. Also raised for quantile fractions
    outside [0, 1] and top-k counts outside [0, len].
    """


class ConfigValidationError(FloydRivestError):
    """Configuration field validation failed.

    Raised when per-call overrides name unknown fields or carry values
    that fail type or bound validation.
    """
