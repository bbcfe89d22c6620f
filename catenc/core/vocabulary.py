"""
Append-only bidirectional vocabulary: category string ↔ integer code.

The shared primitive behind the ordinal and one-hot encoders. Codes are
assigned in first-seen order and are never reassigned or removed, so after
N distinct encodes the codes are exactly 0..N-1.

Lookups are keyed by a 64-bit FNV-1a hash of the UTF-8 bytes rather than by
the string itself. Two distinct strings with the same hash would share a
code; that collision risk is accepted and not detected.

One reentrant lock guards the hash table and the decode list together, so
the check-then-assign step of encode is atomic with respect to every other
operation on the same store.
"""

import threading
from typing import Iterable

FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
_MASK_64 = 0xFFFFFFFFFFFFFFFF


def as_category(value) -> str:
    """Normalize an input to the category string used for identity."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", "surrogateescape")
    return str(value)


def fnv1a_64(s: str) -> int:
    """64-bit FNV-1a hash of the UTF-8 bytes of `s`."""
    h = FNV_OFFSET_BASIS
    for byte in s.encode("utf-8", "surrogateescape"):
        h ^= byte
        h = (h * FNV_PRIME) & _MASK_64
    return h


class Vocabulary:
    """Thread-safe category ↔ code store."""

    def __init__(self, reserve_empty: bool = False):
        self.lock = threading.RLock()
        self._encoder: dict[int, int] = {}
        self._decoder: list[str] = []
        if reserve_empty:
            self.encode("")

    def encode(self, value) -> int:
        """Code for `value`, assigning the next free code if it is new."""
        s = as_category(value)
        key = fnv1a_64(s)
        with self.lock:
            code = self._encoder.get(key)
            if code is None:
                code = len(self._decoder)
                self._decoder.append(s)
                self._encoder[key] = code
            return code

    def encode_many(self, values: Iterable) -> list[int]:
        with self.lock:
            return [self.encode(v) for v in values]

    def decode(self, code) -> str:
        """Category for `code`, or "" when `code` is outside [0, length)."""
        with self.lock:
            if not self._in_range(code):
                return ""
            return self._decoder[int(code)]

    def decode_many(self, codes: Iterable) -> list[str]:
        with self.lock:
            return [self.decode(c) for c in codes]

    def contains(self, value) -> bool:
        key = fnv1a_64(as_category(value))
        with self.lock:
            return key in self._encoder

    def contains_code(self, code) -> bool:
        with self.lock:
            return self._in_range(code)

    def values(self) -> list[str]:
        """Snapshot of all categories in code order."""
        with self.lock:
            return list(self._decoder)

    def __len__(self) -> int:
        with self.lock:
            return len(self._decoder)

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)})"

    # ── Bulk state, used by the serialization collaborators ──

    def state(self) -> tuple[dict[int, int], list[str]]:
        """Copy of the (hash → code table, code-ordered value list) pair."""
        with self.lock:
            return dict(self._encoder), list(self._decoder)

    def load_values(self, values: list[str]) -> None:
        """Replace the contents with `values`, position = code.

        Raises ValueError if `values` holds duplicates.
        """
        decoder = [as_category(v) for v in values]
        encoder = {}
        for code, s in enumerate(decoder):
            key = fnv1a_64(s)
            if key in encoder:
                raise ValueError(f"duplicate category {s!r} at code {code}")
            encoder[key] = code
        with self.lock:
            self._encoder = encoder
            self._decoder = decoder

    def load_state(self, encoder: dict[int, int], decoder: list[str]) -> None:
        """Replace the contents with a previously exported state() pair.

        Raises ValueError if the table and the list disagree.
        """
        if len(encoder) != len(decoder):
            raise ValueError(
                f"table has {len(encoder)} entries but value list has {len(decoder)}"
            )
        for s in decoder:
            code = encoder.get(fnv1a_64(s))
            if code is None or not 0 <= code < len(decoder) or decoder[code] != s:
                raise ValueError(f"table and value list disagree on {s!r}")
        with self.lock:
            self._encoder = dict(encoder)
            self._decoder = list(decoder)

    def _in_range(self, code) -> bool:
        if isinstance(code, bool):
            return False
        try:
            i = int(code)
        except (TypeError, ValueError, OverflowError):
            return False
        if i != code:
            return False
        return 0 <= i < len(self._decoder)
