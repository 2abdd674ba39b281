"""
Exception hierarchy for abits.

Every failure is a caller contract violation, so nothing here is retried.
"""


class AbitsError(Exception):
    """Base class for all abits errors."""


class AlphabetRangeError(AbitsError, ValueError):
    """A code or symbol lies outside the canonical 64-entry table."""


class InvalidSymbolError(AlphabetRangeError):
    """A character is not part of the alphabet for a codec's bit-width."""

    def __init__(self, symbol, width: int, position: int = None):
        self.symbol = symbol
        self.width = width
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Unsupported character {symbol!r}{where} for a {width}-bit alphabet"
        )

    def __reduce__(self):
        return type(self), (self.symbol, self.width, self.position)


class UnsupportedWidthError(AbitsError, ValueError):
    """Bit-width outside 1..6."""


class EmptySequenceError(AbitsError, IndexError):
    """Pop attempted on an empty bit sequence."""


class CorruptSequenceError(AbitsError, ValueError):
    """Bit length is not a whole number of symbols."""


class LengthMismatchError(AbitsError, ValueError):
    """Input length differs from the fixed symbol count of a fixed-width codec."""


class ConfigError(AbitsError, ValueError):
    """Configuration file is malformed."""
