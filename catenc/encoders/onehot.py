"""
One-hot encoding.

Every distinct category owns one dimension of a binary codeword. The
codeword length is the vocabulary size at the time of the encode, so a new
category widens all later codewords. Codewords handed out earlier are not
resized; callers that need fixed-width vectors re-encode once the
vocabulary is complete.
"""

from typing import Iterable

import numpy as np

from catenc.core.errors import CodeLengthError
from catenc.core.interfaces import InvertibleEncoder
from catenc.encoders.registry import register


def contains_one(codeword) -> bool:
    """True iff exactly one entry of `codeword` is 1."""
    return int(np.count_nonzero(np.asarray(codeword) == 1)) == 1


@register("onehot")
class OneHotEncoder(InvertibleEncoder):
    """Category → uint8 one-hot vector, decodable."""

    @property
    def dimension(self) -> int:
        """Current codeword length; grows with every new category."""
        return len(self._vocab)

    def encode(self, value) -> np.ndarray:
        with self._vocab.lock:
            dim = self._vocab.encode(value)
            code = np.zeros(len(self._vocab), dtype=np.uint8)
        code[dim] = 1
        return code

    def decode(self, code) -> str:
        """Category at the first set bit of `code`.

        Raises CodeLengthError if `code` is shorter than the current
        dimension. A codeword without any set bit decodes to "".
        """
        arr = np.asarray(code).ravel()
        with self._vocab.lock:
            n = len(self._vocab)
            if arr.shape[0] < n:
                raise CodeLengthError(arr.shape[0], n)
            hits = np.flatnonzero(arr == 1)
            if hits.size == 0:
                return ""
            return self._vocab.decode(int(hits[0]))

    def contains_code(self, code) -> bool:
        arr = np.asarray(code)
        if arr.ndim != 1:
            return False
        with self._vocab.lock:
            n = len(self._vocab)
            if arr.shape[0] < n or not contains_one(arr):
                return False
            return int(np.flatnonzero(arr == 1)[0]) < n

    def encode_matrix(self, values: Iterable) -> np.ndarray:
        """Encode a batch into one (N, dimension) matrix.

        All rows share the dimension reached after the whole batch has been
        added to the vocabulary.
        """
        with self._vocab.lock:
            dims = self._vocab.encode_many(values)
            out = np.zeros((len(dims), len(self._vocab)), dtype=np.uint8)
        out[np.arange(len(dims)), np.asarray(dims, dtype=np.intp)] = 1
        return out
