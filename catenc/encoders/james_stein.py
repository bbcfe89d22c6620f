"""
James–Stein target encoders.

Both are one-way, target-based encoders fitted once from parallel
sequences of category values and targets.

Regression: each category is encoded as the mean of its targets. This is a
plain mean encoding; no shrinkage toward the global mean is applied.

Classification: each observation is encoded as the shrinkage weight B of
its (category, class) pair,

    gcp  = n(group, class) / n(class)
    cp   = n(class) / N
    gcv  = gcp * (1 - gcp) / n(group)
    cv   = cp * (1 - cp) / N
    B    = gcv / (gcv + cv)

with B = 0 when both variances vanish.
"""

import logging
from collections import Counter, defaultdict
from typing import Iterable, Optional, Sequence

import numpy as np

from catenc.core.errors import TargetLengthError, UnknownCategoryError
from catenc.core.interfaces import ForwardEncoder, ObservationEncoder
from catenc.core.vocabulary import as_category
from catenc.encoders.registry import register

log = logging.getLogger(__name__)


def _check_lengths(values: list, target: Sequence) -> None:
    if target is None:
        raise TargetLengthError(len(values), 0)
    if len(values) != len(target):
        raise TargetLengthError(len(values), len(target))


def shrinkage_weight(
    group_class_count: int, group_count: int, class_count: int, total: int,
) -> float:
    """B for one (group, class) pair. Lies in [0, 1] for positive counts."""
    group_class_pct = group_class_count / class_count
    class_pct = class_count / total
    group_class_var = group_class_pct * (1 - group_class_pct) / group_count
    class_var = class_pct * (1 - class_pct) / total
    denom = group_class_var + class_var
    if denom == 0:
        return 0.0
    return group_class_var / denom


@register("james_stein_regression")
class JamesSteinRegressionEncoder(ForwardEncoder):
    """Category → mean numeric target."""

    def __init__(self, values: Optional[Iterable] = None, target: Optional[Sequence] = None):
        self._means: dict[str, float] = {}
        if values is not None:
            self.fit(values, target)

    def fit(self, values: Iterable, target: Optional[Sequence] = None) -> "JamesSteinRegressionEncoder":
        values = [as_category(v) for v in values]
        _check_lengths(values, target)
        y = np.asarray(target, dtype=np.float64)

        groups: dict[str, list[float]] = defaultdict(list)
        for v, t in zip(values, y):
            groups[v].append(t)

        self._means = {k: float(np.mean(ts)) for k, ts in groups.items()}
        log.info(
            f"James-Stein regression encoder fitted: {len(values)} observations, "
            f"{len(self._means)} categories"
        )
        return self

    def get(self, value, default=None):
        return self._means.get(as_category(value), default)

    def encode(self, value) -> float:
        """Mean target of `value`. Raises UnknownCategoryError if unseen."""
        s = as_category(value)
        if s not in self._means:
            raise UnknownCategoryError(s)
        return self._means[s]

    def __len__(self) -> int:
        return len(self._means)


@register("james_stein_classification")
class JamesSteinClassificationEncoder(ObservationEncoder):
    """Observation → shrinkage weight of its (category, class) pair."""

    def __init__(self, values: Optional[Iterable] = None, target: Optional[Sequence] = None):
        super().__init__()
        self._weights: dict[tuple[str, str], float] = {}
        self._codes = np.zeros(0, dtype=np.float64)
        if values is not None:
            self.fit(values, target)

    def fit(self, values: Iterable, target: Optional[Sequence] = None) -> "JamesSteinClassificationEncoder":
        values = [as_category(v) for v in values]
        _check_lengths(values, target)
        classes = [as_category(c) for c in target]
        total = len(values)

        group_counts = Counter(values)
        class_counts = Counter(classes)
        pair_counts = Counter(zip(values, classes))

        self._weights = {
            (group, cls): shrinkage_weight(
                n, group_counts[group], class_counts[cls], total,
            )
            for (group, cls), n in pair_counts.items()
        }
        self._codes = np.array(
            [self._weights[pair] for pair in zip(values, classes)],
            dtype=np.float64,
        )
        log.info(
            f"James-Stein classification encoder fitted: {total} observations, "
            f"{len(group_counts)} categories, {len(class_counts)} classes"
        )
        return self

    def weight(self, group, cls, default=None):
        """Fitted B for a (category, class) pair, or `default` if never observed."""
        return self._weights.get((as_category(group), as_category(cls)), default)
