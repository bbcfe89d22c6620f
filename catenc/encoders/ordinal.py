"""Ordinal encoding: each distinct category gets the next unused integer."""

from catenc.core.interfaces import InvertibleEncoder
from catenc.encoders.registry import register


@register("ordinal")
class OrdinalEncoder(InvertibleEncoder):
    """Category → int code, decodable.

    With `reserve_empty=True` the empty string is encoded as 0 before
    anything else, so real categories start at 1.
    """

    def encode(self, value) -> int:
        return self._vocab.encode(value)

    def decode(self, code) -> str:
        """Category for `code`; "" for codes that were never assigned."""
        return self._vocab.decode(code)

    def contains_code(self, code) -> bool:
        return self._vocab.contains_code(code)

    def encode_many(self, values) -> list[int]:
        return self._vocab.encode_many(values)

    def decode_many(self, codes) -> list[str]:
        return self._vocab.decode_many(codes)
