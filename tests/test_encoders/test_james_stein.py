"""Tests for the James-Stein target encoders."""

import numpy as np
import pytest

from catenc.core.errors import BoundsError, TargetLengthError, UnknownCategoryError
from catenc.encoders.james_stein import (
    JamesSteinClassificationEncoder, JamesSteinRegressionEncoder, shrinkage_weight,
)


# ── Regression ───────────────────────────────────────────────────────

class TestJamesSteinRegression:
    def test_mean_target(self):
        e = JamesSteinRegressionEncoder(["a", "a"], [2.0, 4.0])
        assert e.get("a") == 3.0

    def test_multiple_groups(self):
        e = JamesSteinRegressionEncoder(["a", "b", "a", "b", "c"], [1, 10, 3, 20, 5])
        assert e.get("a") == pytest.approx(2.0)
        assert e.get("b") == pytest.approx(15.0)
        assert e.get("c") == pytest.approx(5.0)
        assert len(e) == 3

    def test_unseen(self):
        e = JamesSteinRegressionEncoder(["a"], [1.0])
        assert e.get("z") is None
        assert "z" not in e
        with pytest.raises(UnknownCategoryError):
            e.encode("z")

    def test_unknown_category_is_key_error(self):
        e = JamesSteinRegressionEncoder(["a"], [1.0])
        with pytest.raises(KeyError):
            e.encode("z")

    def test_encode_many(self):
        e = JamesSteinRegressionEncoder(["a", "b"], [1.0, 2.0])
        assert e.encode_many(["b", "a", "b"]) == [2.0, 1.0, 2.0]

    def test_length_mismatch(self):
        with pytest.raises(TargetLengthError, match="target"):
            JamesSteinRegressionEncoder(["a", "b"], [1.0])

    def test_missing_target(self):
        with pytest.raises(TargetLengthError):
            JamesSteinRegressionEncoder().fit(["a"])

    def test_numpy_inputs(self):
        e = JamesSteinRegressionEncoder(np.array(["a", "a", "b"]), np.array([1, 2, 3]))
        assert e.get("a") == pytest.approx(1.5)


# ── Classification ───────────────────────────────────────────────────

class TestShrinkageWeight:
    def test_hand_computed(self):
        # group "a": 2 obs, class "1" total 3 of 4, 2 of them in "a"
        gcp = 2 / 3
        cp = 3 / 4
        gcv = gcp * (1 - gcp) / 2
        cv = cp * (1 - cp) / 4
        assert shrinkage_weight(2, 2, 3, 4) == pytest.approx(gcv / (gcv + cv))

    def test_degenerate_zero_variances(self):
        # one class only, all in one group
        assert shrinkage_weight(4, 4, 4, 4) == 0.0


class TestJamesSteinClassification:
    values = ["a", "a", "b", "b", "b", "c"]
    target = ["1", "0", "1", "1", "0", "0"]

    def test_codes_aligned_with_input(self):
        e = JamesSteinClassificationEncoder(self.values, self.target)
        codes = e.codes()
        assert codes.shape == (6,)
        assert codes.dtype == np.float64
        # same (group, class) pair → same code
        assert codes[2] == codes[3]

    def test_matches_formula(self):
        e = JamesSteinClassificationEncoder(self.values, self.target)
        # pair (b, 1): 2 in group b (size 3), class 1 total 3, N = 6
        expected = shrinkage_weight(2, 3, 3, 6)
        assert e.get(2) == pytest.approx(expected)
        assert e.weight("b", "1") == pytest.approx(expected)

    def test_weights_in_unit_interval(self):
        rng = np.random.RandomState(0)
        values = rng.choice(list("abcdef"), size=300).tolist()
        target = rng.choice(["x", "y", "z"], size=300).tolist()
        codes = JamesSteinClassificationEncoder(values, target).codes()
        assert np.all(codes >= 0.0)
        assert np.all(codes <= 1.0)

    def test_get_out_of_bounds(self):
        e = JamesSteinClassificationEncoder(self.values, self.target)
        with pytest.raises(BoundsError):
            e.get(6)
        with pytest.raises(BoundsError):
            e.get(-1)

    def test_get_returns_float(self):
        e = JamesSteinClassificationEncoder(self.values, self.target)
        assert isinstance(e.get(0), float)

    def test_unobserved_pair(self):
        e = JamesSteinClassificationEncoder(self.values, self.target)
        assert e.weight("c", "1") is None

    def test_length_mismatch(self):
        with pytest.raises(TargetLengthError):
            JamesSteinClassificationEncoder(["a", "b"], ["1"])

    def test_empty_batch(self):
        e = JamesSteinClassificationEncoder([], [])
        assert len(e) == 0

    def test_one_way(self):
        assert not JamesSteinClassificationEncoder.invertible
        assert not hasattr(JamesSteinClassificationEncoder(), "decode")
