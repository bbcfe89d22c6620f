"""
Encoder error taxonomy.

Every failure an encoder can report derives from EncoderError, and also from
the builtin exception callers would naturally catch for it.
"""


class EncoderError(Exception):
    """Base class for all catenc errors."""


class BoundsError(EncoderError, IndexError):
    """Index outside [0, length) for a fitted observation sequence."""

    def __init__(self, index, length: int):
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of bounds for length {length}")


class CodeLengthError(EncoderError, ValueError):
    """Codeword shorter than the encoder's current dimension."""

    def __init__(self, got: int, expected: int):
        self.got = got
        self.expected = expected
        super().__init__(
            f"codeword length {got} does not cover encoder dimension {expected}"
        )


class TargetLengthError(EncoderError, ValueError):
    """Target sequence is not the same length as the categorical data."""

    def __init__(self, n_values: int, n_target: int):
        self.n_values = n_values
        self.n_target = n_target
        super().__init__(
            f"target has {n_target} entries, expected {n_values} "
            f"(one per categorical value)"
        )


class InvalidArgumentError(EncoderError, ValueError):
    """Constructor argument outside its valid domain (e.g. window <= 0)."""


class UnknownCategoryError(EncoderError, KeyError):
    """Category was not present in the fitting batch."""


class VocabularyFormatError(EncoderError, ValueError):
    """Persisted vocabulary could not be parsed or is inconsistent."""
