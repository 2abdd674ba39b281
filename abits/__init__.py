"""
abits - alphabet bit packing

Packs text drawn from a power-of-two prefix of the Base64 alphabet into the
minimum number of bits per symbol (1 for Base2 up to 6 for Base64), and
unpacks it losslessly.
"""

from abits.alphabet import (
    ALPHABET,
    BASE64_CHARSET,
    AlphabetTable,
    NumeralType,
    validate_width,
)
from abits.bit_sequence import BitSequence
from abits.symbol_codec import SymbolCodec
from abits.fixed_width import FixedWidthCodec
from abits.compression import Compressor
from abits.config_loader import load_config
from abits.log import configure_logging, get_logger
from abits.errors import (
    AbitsError,
    AlphabetRangeError,
    InvalidSymbolError,
    UnsupportedWidthError,
    EmptySequenceError,
    CorruptSequenceError,
    LengthMismatchError,
    ConfigError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ALPHABET",
    "BASE64_CHARSET",
    "AlphabetTable",
    "NumeralType",
    "validate_width",
    "BitSequence",
    "SymbolCodec",
    "FixedWidthCodec",
    "Compressor",
    "load_config",
    "configure_logging",
    "get_logger",
    "AbitsError",
    "AlphabetRangeError",
    "InvalidSymbolError",
    "UnsupportedWidthError",
    "EmptySequenceError",
    "CorruptSequenceError",
    "LengthMismatchError",
    "ConfigError",
]
