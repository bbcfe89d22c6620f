"""
Frequency encoders.

Both are one-way: different categories with the same count share a code,
so there is no decode.

  FrequencyEncoder         category → occurrences in the fitting batch
  RollingFrequencyEncoder  observation → running count of its category
                           within a window of consecutive observations
"""

import logging
from collections import Counter
from typing import Iterable, Optional, Sequence

import numpy as np

from catenc.core.errors import InvalidArgumentError
from catenc.core.interfaces import ForwardEncoder, ObservationEncoder
from catenc.core.vocabulary import as_category
from catenc.encoders.registry import register

log = logging.getLogger(__name__)


@register("frequency")
class FrequencyEncoder(ForwardEncoder):
    """Category → count in the fitting batch. Lookups never update counts."""

    def __init__(self, values: Optional[Iterable] = None):
        self._counts: Counter = Counter()
        if values is not None:
            self.fit(values)

    def fit(self, values: Iterable, target: Optional[Sequence] = None) -> "FrequencyEncoder":
        self._counts = Counter(as_category(v) for v in values)
        log.info(
            f"Frequency encoder fitted: {sum(self._counts.values())} observations, "
            f"{len(self._counts)} categories"
        )
        return self

    def get(self, value, default=None):
        s = as_category(value)
        if s not in self._counts:
            return default
        return self._counts[s]

    def encode(self, value) -> int:
        """Count of `value`; 0 if it never appeared."""
        return self._counts.get(as_category(value), 0)

    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)


@register("rolling_frequency")
class RollingFrequencyEncoder(ObservationEncoder):
    """Per-observation count of its category inside the current window.

    The count table is cleared whenever the zero-based observation index is
    a multiple of `window`. Counts include the current observation, so the
    first occurrence in a window is 1.

        >>> RollingFrequencyEncoder(3, list("xxyxyy")).codes().tolist()
        [1, 2, 1, 1, 1, 2]
    """

    def __init__(self, window: int, values: Optional[Iterable] = None):
        if isinstance(window, bool) or not isinstance(window, (int, np.integer)):
            raise InvalidArgumentError(f"window must be an integer, got {window!r}")
        if window <= 0:
            raise InvalidArgumentError(f"window must be > 0, got {window}")
        super().__init__()
        self._window = int(window)
        self._codes = np.zeros(0, dtype=np.int64)
        if values is not None:
            self.fit(values)

    @property
    def window(self) -> int:
        return self._window

    def fit(self, values: Iterable, target: Optional[Sequence] = None) -> "RollingFrequencyEncoder":
        values = [as_category(v) for v in values]
        codes = np.zeros(len(values), dtype=np.int64)

        counts: Counter = Counter()
        for i, v in enumerate(values):
            if i % self._window == 0:
                counts = Counter()
            counts[v] += 1
            codes[i] = counts[v]

        self._codes = codes
        log.info(
            f"Rolling frequency encoder fitted: {len(codes)} observations, "
            f"window={self._window}"
        )
        return self
