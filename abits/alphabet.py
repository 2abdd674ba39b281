"""
Canonical 64-symbol alphabet shared by every supported bit-width.

The Base2 alphabet is the first 2 symbols of the table, Base4 the first 4,
and so on up to Base64. Base16 is therefore "A".."P", not hexadecimal.
"""

from enum import IntEnum

from .errors import AlphabetRangeError, UnsupportedWidthError

MIN_WIDTH = 1
MAX_WIDTH = 6

BASE64_CHARSET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789+/"
)


class NumeralType(IntEnum):
    """
    Numeral systems supported by the codec.

    The integral value is the number of bits used per symbol.
    """

    BASE2 = 1
    BASE4 = 2
    BASE8 = 3
    BASE16 = 4
    BASE32 = 5
    BASE64 = 6

    BINARY = 1
    QUATERNARY = 2
    OCTAL = 3
    HEXADECIMAL = 4
    DUOTRIGESIMAL = 5
    TETRASEXAGESIMAL = 6

    @property
    def bit_width(self) -> int:
        return int(self)

    @property
    def alphabet_size(self) -> int:
        return 1 << int(self)

    @property
    def mask(self) -> int:
        return (1 << int(self)) - 1

    @classmethod
    def from_name(cls, name: str) -> "NumeralType":
        """Looks up a member (or alias) by name, ignoring case."""
        if not isinstance(name, str):
            raise TypeError("Numeral type name must be a string.")
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise UnsupportedWidthError(f"Unknown numeral type: {name}") from None


def validate_width(width) -> NumeralType:
    """
    Checks a bit-width and returns it as a NumeralType.

    Parameters:
    width (int | NumeralType): Number of bits per symbol.

    Returns:
    NumeralType: The matching numeral type.
    """
    if isinstance(width, bool) or not isinstance(width, int):
        raise UnsupportedWidthError(f"Bit-width must be an integer, got {width!r}")
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise UnsupportedWidthError(
            f"Bit-width must be between {MIN_WIDTH} and {MAX_WIDTH}, got {width}"
        )
    return NumeralType(width)


class AlphabetTable:
    """Ordered bijection between 6-bit codes and printable symbols."""

    def __init__(self, charset: str = BASE64_CHARSET):
        if len(charset) != 1 << MAX_WIDTH or len(set(charset)) != len(charset):
            raise ValueError("Alphabet table needs 64 distinct symbols.")
        self._symbols = charset
        self._codes = {char: idx for idx, char in enumerate(charset)}

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self):
        return iter(self._symbols)

    def __contains__(self, symbol) -> bool:
        return isinstance(symbol, str) and symbol in self._codes

    def code_of(self, symbol: str) -> int:
        """
        Returns the 6-bit code of a symbol.

        Parameters:
        symbol (str): A single character of the table.

        Returns:
        int: Code in 0..63.
        """
        if not isinstance(symbol, str) or symbol not in self._codes:
            raise AlphabetRangeError(f"Symbol not in alphabet: {symbol!r}")
        return self._codes[symbol]

    def symbol_of(self, code: int) -> str:
        """
        Returns the symbol for a 6-bit code.

        Parameters:
        code (int): Code in 0..63.

        Returns:
        str: The matching symbol.
        """
        if isinstance(code, bool) or not isinstance(code, int):
            raise AlphabetRangeError(f"Code must be an integer, got {code!r}")
        if not 0 <= code < len(self._symbols):
            raise AlphabetRangeError(f"Code out of range: {code}")
        return self._symbols[code]

    def alphabet(self, width) -> str:
        """Returns the first 2**width symbols, the alphabet for that width."""
        numeral = validate_width(width)
        return self._symbols[:numeral.alphabet_size]

    def is_valid(self, symbol, width) -> bool:
        numeral = validate_width(width)
        return symbol in self and self._codes[symbol] < numeral.alphabet_size


# Process-wide constant table
ALPHABET = AlphabetTable()
