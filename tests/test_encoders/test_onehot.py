"""Tests for the one-hot encoder."""

import numpy as np
import pytest

from catenc.core.errors import CodeLengthError
from catenc.encoders.onehot import OneHotEncoder, contains_one


class TestContainsOne:
    def test_single_bit(self):
        assert contains_one([0, 1, 0])

    def test_all_zero(self):
        assert not contains_one([0, 0, 0])

    def test_multiple_bits(self):
        assert not contains_one([1, 0, 1])

    def test_empty(self):
        assert not contains_one([])


class TestOneHotEncoder:
    def test_first_codeword(self):
        e = OneHotEncoder()
        code = e.encode("a")
        assert code.dtype == np.uint8
        assert code.tolist() == [1]

    def test_dimension_grows(self):
        e = OneHotEncoder()
        e.encode("a")
        code = e.encode("b")
        assert e.dimension == 2
        assert code.tolist() == [0, 1]

    def test_earlier_codewords_not_resized(self):
        e = OneHotEncoder()
        old = e.encode("a")
        e.encode("b")
        assert len(old) == 1
        assert e.encode("a").tolist() == [1, 0]

    def test_reserve_empty(self):
        e = OneHotEncoder(reserve_empty=True)
        assert e.dimension == 1
        assert e.encode("a").tolist() == [0, 1]
        assert e.decode([1, 0]) == ""

    def test_single_set_bit_at_assigned_dimension(self):
        e = OneHotEncoder()
        e.fit(["x", "y", "z"])
        for i, v in enumerate(["x", "y", "z"]):
            code = e.encode(v)
            assert contains_one(code)
            assert int(np.argmax(code)) == i

    def test_decode_roundtrip(self):
        e = OneHotEncoder()
        for v in ["x", "y", "z"]:
            e.encode(v)
        for v in ["x", "y", "z"]:
            assert e.decode(e.encode(v)) == v

    def test_decode_short_codeword_fails(self):
        e = OneHotEncoder()
        old = e.encode("a")
        e.encode("b")
        with pytest.raises(CodeLengthError, match="does not cover"):
            e.decode(old)

    def test_decode_longer_codeword_ok(self):
        e = OneHotEncoder()
        e.fit(["a", "b"])
        assert e.decode([0, 1, 0, 0]) == "b"

    def test_decode_first_set_bit_wins(self):
        e = OneHotEncoder()
        e.fit(["a", "b", "c"])
        assert e.decode([0, 1, 1]) == "b"

    def test_decode_all_zero_is_empty(self):
        e = OneHotEncoder()
        e.fit(["a", "b"])
        assert e.decode([0, 0]) == ""

    def test_contains_code(self):
        e = OneHotEncoder()
        e.fit(["a", "b"])
        assert e.contains_code([0, 1])
        assert e.contains_code(np.array([1, 0, 0], dtype=np.uint8))
        assert not e.contains_code([1])
        assert not e.contains_code([0, 0])
        assert not e.contains_code([1, 1])
        assert not e.contains_code([0, 0, 1])

    def test_decode_many(self):
        e = OneHotEncoder()
        e.fit(["a", "b"])
        assert e.decode_many([[1, 0], [0, 1]]) == ["a", "b"]

    def test_encode_matrix(self):
        e = OneHotEncoder()
        m = e.encode_matrix(["a", "b", "a", "c"])
        assert m.shape == (4, 3)
        assert m.sum(axis=1).tolist() == [1, 1, 1, 1]
        assert m[2].tolist() == [1, 0, 0]

    def test_encode_matrix_empty(self):
        m = OneHotEncoder().encode_matrix([])
        assert m.shape == (0, 0)
