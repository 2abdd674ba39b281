import pytest
from bitarray import bitarray

from abits.compression import Compressor
from abits.errors import CorruptSequenceError, InvalidSymbolError


@pytest.mark.parametrize("method, width", [("base2", 1), ("base4", 2), ("BASE8", 3), ("hexadecimal", 4), ("base32", 5), ("tetrasexagesimal", 6)])
def test_method_selects_width(method, width):
    compressor = Compressor(method=method)
    assert compressor.width == width
    assert compressor.method in Compressor.VALID_METHODS


def test_compress_and_decompress():
    compressor = Compressor(method="base4")
    compressed = compressor.compress("ABCDCBA")
    assert isinstance(compressed, bitarray)
    assert compressed.to01() == "00100111011000"
    assert compressor.decompress(compressed) == "ABCDCBA"


def test_base64_text():
    compressor = Compressor(method="base64")
    text = "Hello+World/2024"
    compressed = compressor.compress(text)
    assert len(compressed) == len(text) * 6
    assert compressor.decompress(compressed) == text


def test_default_method_comes_from_config(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("codec:\n  default_method: base8\n")
    assert Compressor(config_path=str(config_file)).method == "base8"


def test_packaged_default_is_base64():
    assert Compressor().method == "base64"


def test_unsupported_method():
    with pytest.raises(ValueError, match="Unsupported compression method"):
        Compressor(method="lz77")
    with pytest.raises(TypeError):
        Compressor(method=6)


def test_type_checks():
    compressor = Compressor(method="base2")
    with pytest.raises(TypeError):
        compressor.compress(b"AB")
    with pytest.raises(TypeError):
        compressor.decompress("0101")


def test_codec_errors_propagate():
    compressor = Compressor(method="base2")
    with pytest.raises(InvalidSymbolError):
        compressor.compress("ABC")
    with pytest.raises(CorruptSequenceError):
        Compressor(method="base8").decompress(bitarray("1010"))
