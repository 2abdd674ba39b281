"""
Growable bit sequence, mutated only at its tail.
"""

from bitarray import bitarray

from .errors import EmptySequenceError


class BitSequence:
    """
    Ordered sequence of single bits backed by a bitarray.

    append_bit() and pop_bit() both work on the tail, so the sequence can be
    filled like a list and drained like a stack.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: bitarray = None):
        self._bits = bitarray(endian="big") if bits is None else bitarray(bits, endian="big")

    @classmethod
    def from01(cls, text: str) -> "BitSequence":
        """
        Builds a sequence from a string of '0' and '1' characters.

        Parameters:
        text (str): Bits in index order, e.g. the output of to01().

        Returns:
        BitSequence: A new sequence.
        """
        if not isinstance(text, str):
            raise TypeError("Bit string must be a string.")
        if text.strip("01"):
            raise ValueError(f"Bit string may only contain '0' and '1': {text!r}")
        return cls(bitarray(text, endian="big"))

    @classmethod
    def from_bitarray(cls, bits: bitarray) -> "BitSequence":
        if not isinstance(bits, bitarray):
            raise TypeError("Input bits must be a bitarray.")
        return cls(bits)

    def append_bit(self, bit) -> None:
        if bit not in (0, 1):
            raise ValueError(f"Bit must be 0 or 1, got {bit!r}")
        self._bits.append(int(bit))

    def pop_bit(self) -> int:
        if not self._bits:
            raise EmptySequenceError("pop from empty bit sequence")
        return self._bits.pop()

    def length(self) -> int:
        return len(self._bits)

    def copy(self) -> "BitSequence":
        return BitSequence(self._bits)

    def to_bitarray(self) -> bitarray:
        return bitarray(self._bits, endian="big")

    def to01(self) -> str:
        """Debug rendering, index 0 first."""
        return self._bits.to01()

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self):
        return iter(self._bits.tolist())

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitSequence):
            return NotImplemented
        return self._bits == other._bits

    def __str__(self) -> str:
        return self.to01()

    def __repr__(self) -> str:
        return f"BitSequence('{self.to01()}')"
