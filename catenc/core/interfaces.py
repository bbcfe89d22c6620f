"""
Abstract base classes defining the encoder capabilities.

Two-way encoders (ordinal, one-hot) can map a code back to its category.
One-way encoders cannot, because several categories may share a code, so
they expose no decode at all. One-way encoders come in two shapes: lookups
keyed by category value, and codes aligned with the fitted observations.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Sequence

import numpy as np

from catenc.core.errors import BoundsError
from catenc.core.vocabulary import Vocabulary


class BaseEncoder(ABC):
    """Contract: batch of category values (+ optional target) → fitted encoder."""

    invertible: bool = False

    @abstractmethod
    def fit(self, values: Iterable, target: Optional[Sequence] = None) -> "BaseEncoder":
        """Fit on a batch of observations. Returns self."""
        ...


class InvertibleEncoder(BaseEncoder):
    """Contract: category ↔ code, growing the vocabulary on every new category."""

    invertible = True

    def __init__(self, reserve_empty: bool = False):
        self._vocab = Vocabulary(reserve_empty=reserve_empty)

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocab

    def fit(self, values: Iterable, target: Optional[Sequence] = None) -> "InvertibleEncoder":
        """Add every value of the batch to the vocabulary. `target` is ignored."""
        self.encode_many(values)
        return self

    @abstractmethod
    def encode(self, value) -> Any:
        ...

    @abstractmethod
    def decode(self, code) -> str:
        ...

    @abstractmethod
    def contains_code(self, code) -> bool:
        ...

    def encode_many(self, values: Iterable) -> list:
        with self._vocab.lock:
            return [self.encode(v) for v in values]

    def decode_many(self, codes: Iterable) -> list[str]:
        with self._vocab.lock:
            return [self.decode(c) for c in codes]

    def contains(self, value) -> bool:
        """Whether `value` has been assigned a code."""
        return self._vocab.contains(value)

    def values(self) -> list[str]:
        """Known categories in code order."""
        return self._vocab.values()

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return len(self._vocab)


class ForwardEncoder(BaseEncoder):
    """Contract: category → code, fixed after fitting. No decode."""

    @abstractmethod
    def get(self, value, default=None):
        """Fitted code for `value`, or `default` if it was not in the batch."""
        ...

    @abstractmethod
    def encode(self, value):
        ...

    def encode_many(self, values: Iterable) -> list:
        return [self.encode(v) for v in values]

    def __contains__(self, value) -> bool:
        return self.get(value) is not None


class ObservationEncoder(BaseEncoder):
    """Contract: one code per fitted observation, in input order. No decode."""

    def __init__(self):
        self._codes = np.zeros(0)

    def codes(self) -> np.ndarray:
        """Copy of the per-observation codes."""
        return self._codes.copy()

    def get(self, index: int):
        """Code of observation `index`. Raises BoundsError outside [0, length)."""
        n = len(self._codes)
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise BoundsError(index, n)
        if index < 0 or index > n - 1:
            raise BoundsError(index, n)
        return self._codes[index].item()

    def __len__(self) -> int:
        return len(self._codes)
