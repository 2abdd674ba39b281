"""
Variable bit-width symbol codec.

A SymbolCodec packs text drawn from the first 2**b symbols of the canonical
alphabet into exactly b bits per symbol and unpacks it again.

Bit layout: the text is walked in reverse and every code is appended to the
tail of the sequence least-significant bit first. Decoding pops bits off the
tail, so each code comes back most-significant bit first and the symbols come
back in their original order.
"""

from bitarray import bitarray

from .alphabet import ALPHABET, NumeralType, validate_width
from .bit_sequence import BitSequence
from .errors import AlphabetRangeError, CorruptSequenceError, InvalidSymbolError
from .log import get_logger

logger = get_logger(__name__)


class SymbolCodec:
    """
    One encoded message of a fixed bit-width.

    Instances are immutable values: the text is encoded once, on
    construction, and there is no API to add symbols afterwards.
    """

    __slots__ = ("_numeral", "_bits")

    def __init__(self, text: str, width=NumeralType.BASE64):
        """
        Encodes the given text.

        Parameters:
        text (str): Symbols from the first 2**width entries of the alphabet.
        width (int | NumeralType): Bits per symbol, 1 to 6.
        """
        numeral = validate_width(width)
        if not isinstance(text, str):
            raise TypeError("Input text must be a string.")
        object.__setattr__(self, "_numeral", numeral)
        object.__setattr__(self, "_bits", self._encode(text, numeral))
        logger.debug(
            "Encoded %d symbols as %s (%d bits)", len(text), numeral.name, len(self._bits)
        )

    @classmethod
    def from_bits(cls, bits, width) -> "SymbolCodec":
        """
        Wraps an existing bit pattern for decoding.

        Parameters:
        bits (BitSequence | bitarray | str): Bits in index order. A str must
        hold only '0' and '1'. The bits are copied.
        width (int | NumeralType): Bits per symbol, 1 to 6.

        Returns:
        SymbolCodec: A codec holding the given bits. The length is checked
        when the codec is decoded.
        """
        numeral = validate_width(width)
        if isinstance(bits, BitSequence):
            sequence = bits.copy()
        elif isinstance(bits, bitarray):
            sequence = BitSequence.from_bitarray(bits)
        elif isinstance(bits, str):
            sequence = BitSequence.from01(bits)
        else:
            raise TypeError("Input bits must be a BitSequence, bitarray or '0'/'1' string.")

        codec = cls.__new__(cls)
        object.__setattr__(codec, "_numeral", numeral)
        object.__setattr__(codec, "_bits", sequence)
        return codec

    @staticmethod
    def _encode(text: str, numeral: NumeralType) -> BitSequence:
        # Validate front to back so the first bad character is reported
        codes = []
        for position, char in enumerate(text):
            try:
                code = ALPHABET.code_of(char)
            except AlphabetRangeError as err:
                raise InvalidSymbolError(char, int(numeral), position=position) from err
            if code > numeral.mask:
                raise InvalidSymbolError(char, int(numeral), position=position)
            codes.append(code)

        bits = BitSequence()
        for code in reversed(codes):
            code &= numeral.mask
            # Least significant bit first
            for _ in range(numeral.bit_width):
                bits.append_bit(code & 0x01)
                code >>= 1
        return bits

    def to_text(self) -> str:
        """
        Decodes the stored bits back to text.

        The stored sequence is left untouched; decoding drains a copy.

        Returns:
        str: The original text.
        """
        width = self._numeral.bit_width
        if self._bits.length() % width:
            raise CorruptSequenceError(
                f"Bit length {self._bits.length()} is not a multiple of {width}"
            )

        bits = self._bits.copy()
        text = []
        for _ in range(bits.length() // width):
            code = 0
            for _ in range(width):
                code = (code << 1) | bits.pop_bit()
            text.append(ALPHABET.symbol_of(code))
        logger.debug("Decoded %d bits as %d symbols", self._bits.length(), len(text))
        return "".join(text)

    def bit_length(self) -> int:
        return self._bits.length()

    def symbol_width(self) -> int:
        """Returns the bit-width b of this codec, not the number of symbols."""
        return self._numeral.bit_width

    def symbol_count(self) -> int:
        """Number of encoded symbols, bit_length / b."""
        return self._bits.length() // self._numeral.bit_width

    def numeral_type(self) -> NumeralType:
        return self._numeral

    def numeral_name(self) -> str:
        return f"{NumeralType.__name__}.{self._numeral.name}"

    def bitstring(self) -> str:
        """Debug rendering of the stored bits, index 0 first."""
        return self._bits.to01()

    def bits(self) -> BitSequence:
        return self._bits.copy()

    def to_bitarray(self) -> bitarray:
        return self._bits.to_bitarray()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, SymbolCodec):
            return NotImplemented
        return self._numeral == other._numeral and self._bits == other._bits

    def __hash__(self):
        return hash((int(self._numeral), self._bits.to01()))

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={int(self._numeral)}, bits='{self.bitstring()}')"
