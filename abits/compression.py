from bitarray import bitarray

from .alphabet import NumeralType
from .config_loader import load_config
from .errors import UnsupportedWidthError
from .log import get_logger
from .symbol_codec import SymbolCodec

logger = get_logger(__name__)


class Compressor:
        # Compression Block: pack plaintext into the fewest bits its alphabet
        # allows. The method names the alphabet (base2 .. base64); input is a
        # plaintext and output is a bitarray holding b bits per symbol.
        VALID_METHODS = {'base2', 'base4', 'base8', 'base16', 'base32', 'base64'}

        def __init__(self, method=None, config_path=None):
            """
            Initializes the Compressor with the specified compression method.

            Parameters:
            method (str, optional): The compression method to be used (e.g., 'base16').
            Numeral aliases such as 'hexadecimal' are accepted too. Defaults to
            codec.default_method from the config file.
            config_path (str, optional): Config file used when method is omitted.
            """
            if method is None:
                method = load_config(config_path)["codec"]["default_method"]
            if not isinstance(method, str):
                raise TypeError("Compression method must be a string.")
            try:
                self.numeral = NumeralType.from_name(method)
            except UnsupportedWidthError:
                raise ValueError(f"Unsupported compression method: {method}") from None
            self.method = self.numeral.name.lower()
            logger.debug("Compressor using method %s", self.method)

        @property
        def width(self) -> int:
            return self.numeral.bit_width

        def compress(self, plaintext: str) -> bitarray:
            """
            Compresses the given plaintext using the specified method.

            Parameters:
            plaintext (str): The text to compress.

            Returns:
            bitarray: Compressed binary data.
            """
            if not isinstance(plaintext, str):
                raise TypeError("Input plaintext must be a string.")
            return SymbolCodec(plaintext, self.numeral).to_bitarray()

        def decompress(self, compressed: bitarray) -> str:
            """
            Decompresses the given binary data using the specified method.

            Parameters:
            compressed (bitarray): Compressed binary data.

            Returns:
            str: Decompressed text.
            """
            if not isinstance(compressed, bitarray):
                raise TypeError("Input compressed data must be a bitarray.")
            return SymbolCodec.from_bits(compressed, self.numeral).to_text()
