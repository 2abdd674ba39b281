import pytest

from abits.errors import InvalidSymbolError, LengthMismatchError
from abits.fixed_width import FixedWidthCodec
from abits.symbol_codec import SymbolCodec


def test_fixed_width_matches_symbol_codec_layout():
    codec = FixedWidthCodec("ABCDCBA", 7, width=2)
    assert codec.bitstring() == SymbolCodec("ABCDCBA", 2).bitstring()
    assert codec.to_text() == "ABCDCBA"
    assert codec.fixed_symbol_count() == 7
    assert codec.symbol_count() == 7


def test_default_width_is_base16():
    codec = FixedWidthCodec("PONM", 4)
    assert codec.symbol_width() == 4
    assert codec.bit_length() == 16


@pytest.mark.parametrize("text", ["ABC", "ABCDE", ""])
def test_length_must_match(text):
    with pytest.raises(LengthMismatchError):
        FixedWidthCodec(text, 4)


@pytest.mark.parametrize("count", [-1, 1.5, None, True])
def test_symbol_count_must_be_non_negative_int(count):
    with pytest.raises(ValueError):
        FixedWidthCodec("A", count)


def test_symbol_validation_still_applies():
    with pytest.raises(InvalidSymbolError):
        FixedWidthCodec("AZ", 2, width=4)


def test_repr():
    assert repr(FixedWidthCodec("B", 1, width=1)) == "FixedWidthCodec(width=1, symbol_count=1, bits='1')"


def test_positional_arguments_are_text_count_width():
    codec = FixedWidthCodec("AB", 2, 1)
    assert codec.bitstring() == "10"
    assert codec.fixed_symbol_count() == 2
    assert codec.symbol_width() == 1


def test_from_bits_keeps_the_fixed_count():
    codec = FixedWidthCodec.from_bits("0101", 4, width=1)
    assert isinstance(codec, FixedWidthCodec)
    assert codec.fixed_symbol_count() == 4
    assert codec.to_text() == "BABA"
    assert repr(codec) == "FixedWidthCodec(width=1, symbol_count=4, bits='0101')"


def test_from_bits_defaults_to_base16():
    codec = FixedWidthCodec.from_bits(FixedWidthCodec("PONM", 4).bits(), 4)
    assert codec.to_text() == "PONM"


@pytest.mark.parametrize("bits, count", [("0101", 3), ("0101", 5), ("", 1)])
def test_from_bits_length_must_match(bits, count):
    with pytest.raises(LengthMismatchError):
        FixedWidthCodec.from_bits(bits, count, width=1)


def test_from_bits_checks_symbol_count():
    with pytest.raises(ValueError):
        FixedWidthCodec.from_bits("0101", -1, width=1)
