"""
Fixed-length variant of the symbol codec.

Superseded by SymbolCodec; kept for callers that size messages up front.
The bit layout is identical, so either class decodes the other's bits.
"""

from .alphabet import NumeralType
from .errors import LengthMismatchError
from .symbol_codec import SymbolCodec


def _check_count(symbol_count) -> None:
    if isinstance(symbol_count, bool) or not isinstance(symbol_count, int) or symbol_count < 0:
        raise ValueError(f"Symbol count must be a non-negative integer, got {symbol_count!r}")


class FixedWidthCodec(SymbolCodec):
    """A SymbolCodec whose input must be exactly symbol_count symbols long."""

    __slots__ = ("_fixed_count",)

    def __init__(self, text: str, symbol_count: int, width=NumeralType.BASE16):
        _check_count(symbol_count)
        if isinstance(text, str) and len(text) != symbol_count:
            raise LengthMismatchError(
                f"Expected {symbol_count} symbols, got {len(text)}"
            )
        super().__init__(text, width)
        object.__setattr__(self, "_fixed_count", symbol_count)

    @classmethod
    def from_bits(cls, bits, symbol_count: int, width=NumeralType.BASE16) -> "FixedWidthCodec":
        """
        Wraps an existing bit pattern of exactly symbol_count symbols.

        Parameters:
        bits (BitSequence | bitarray | str): Bits in index order, copied.
        symbol_count (int): Number of symbols the pattern must hold.
        width (int | NumeralType): Bits per symbol, 1 to 6.

        Returns:
        FixedWidthCodec: A codec holding the given bits.
        """
        _check_count(symbol_count)
        codec = super().from_bits(bits, width)
        expected = symbol_count * codec.symbol_width()
        if codec.bit_length() != expected:
            raise LengthMismatchError(
                f"Expected {expected} bits for {symbol_count} symbols, got {codec.bit_length()}"
            )
        object.__setattr__(codec, "_fixed_count", symbol_count)
        return codec

    def fixed_symbol_count(self) -> int:
        return self._fixed_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(width={self.symbol_width()}, "
            f"symbol_count={self._fixed_count}, bits='{self.bitstring()}')"
        )
