import io
import random

import pytest
from bitarray import bitarray

from huffproc.bit_utils.bit_channel import BitInputStream, BitOutputStream
from huffproc.huff_constants import DEBUG_HIGH, DEBUG_LOW, HUFF_TREE, PSEUDO_EOF
from huffproc.huff_exceptions import (
    ErrorKind,
    FormatError,
    HuffException,
    TruncatedBodyError,
    TruncatedHeaderError,
)
from huffproc.huff_processor import HuffProcessor


def _compressed_bits(data: bytes) -> bitarray:
    buffer = io.BytesIO()
    out = BitOutputStream(buffer)
    HuffProcessor().compress_bits(BitInputStream(data), out)
    bits = bitarray(endian="big")
    bits.frombytes(buffer.getvalue())
    return bits[:out.bits_written]


@pytest.mark.parametrize("data", [
    b"",
    b"a",
    b"ab",
    b"\x00\x00\x00",
    bytes(range(256)),
    b"A" * 1000,
    b"This is a test" * 100,
    bytes(random.Random(0).getrandbits(8) for _ in range(10 * 1024)),
])
def test_roundtrip(data):
    compressed, _ = HuffProcessor.compress_bytes(data)
    decompressed, _ = HuffProcessor.decompress_bytes(compressed)
    assert decompressed == data


def test_compressed_file_starts_with_magic():
    compressed, _ = HuffProcessor.compress_bytes(b"hello")
    assert compressed[:4] == HUFF_TREE.to_bytes(4, "big")


def test_compression_is_deterministic():
    data = b"deterministic output " * 50
    first, _ = HuffProcessor.compress_bytes(data)
    second, _ = HuffProcessor.compress_bytes(data)
    assert first == second


def test_skewed_text_gets_smaller():
    data = b"aaaaaaaabbbbcc d" * 500
    compressed, log = HuffProcessor.compress_bytes(data)
    assert len(compressed) < len(data) // 3
    assert "Size reduced by" in log


def test_single_symbol_input():
    processor = HuffProcessor()
    out = BitOutputStream(io.BytesIO())
    tree = processor.compress_bits(BitInputStream(b"\x41" * 1000), out)
    assert sorted(tree.leaves()) == [0x41, PSEUDO_EOF]
    # magic + 21 header bits + one bit per word + one bit for PSEUDO_EOF
    assert out.bits_written == 32 + 21 + 1000 + 1


def test_empty_input_is_header_and_pseudo_eof():
    compressed, _ = HuffProcessor.compress_bytes(b"")
    # 32 + 21 + 1 bits rounded up to whole bytes
    assert len(compressed) == 7
    decompressed, _ = HuffProcessor.decompress_bytes(compressed)
    assert decompressed == b""


def test_decompress_returns_header_tree():
    data = b"tree from header"
    in_stream = BitInputStream(_compressed_bits(data))
    tree = HuffProcessor().decompress_bits(in_stream, BitOutputStream(io.BytesIO()))
    assert sorted(tree.leaves()) == sorted(set(data) | {PSEUDO_EOF})


def test_flipped_magic_bit_is_format_error():
    bits = _compressed_bits(b"Hello World" * 50)
    bits[31] = not bits[31]
    in_stream = BitInputStream(bits)
    with pytest.raises(FormatError) as exc:
        HuffProcessor().decompress_bits(in_stream, BitOutputStream(io.BytesIO()))
    assert exc.value.kind is ErrorKind.FORMAT
    assert in_stream.bits_read == 32


def test_corrupted_first_byte_is_format_error():
    compressed = bytearray(HuffProcessor.compress_bytes(b"Hello World" * 50)[0])
    compressed[0] ^= 0xFF
    with pytest.raises(FormatError):
        HuffProcessor.decompress_bytes(bytes(compressed))


@pytest.mark.parametrize("data", [b"", b"abc", b"short"])
def test_input_shorter_than_magic_is_format_error(data):
    with pytest.raises(FormatError):
        HuffProcessor.decompress_bytes(data[:3])


def test_cut_inside_header():
    bits = _compressed_bits(b"header cut")
    with pytest.raises(TruncatedHeaderError) as exc:
        HuffProcessor().decompress_bits(BitInputStream(bits[:40]), BitOutputStream(io.BytesIO()))
    assert exc.value.kind is ErrorKind.TRUNCATED_HEADER


@pytest.mark.parametrize("cut", [1, 2])
def test_cut_inside_pseudo_eof_code(cut):
    data = b"A" * 20 + b"BC"
    bits = _compressed_bits(data)
    with pytest.raises(TruncatedBodyError) as exc:
        HuffProcessor().decompress_bits(BitInputStream(bits[:-cut]), BitOutputStream(io.BytesIO()))
    assert exc.value.kind is ErrorKind.TRUNCATED_BODY


def test_truncated_bytes_are_detected():
    compressed, _ = HuffProcessor.compress_bytes(b"This is a test" * 100)
    with pytest.raises(TruncatedBodyError):
        HuffProcessor.decompress_bytes(compressed[:-3])


def test_all_errors_share_base_class():
    compressed, _ = HuffProcessor.compress_bytes(b"base class")
    with pytest.raises(HuffException):
        HuffProcessor.decompress_bytes(compressed[:-2])


def test_log_reports_bits():
    data = b"log me " * 20
    _, log = HuffProcessor.compress_bytes(data)
    assert f"Bits read: {len(data) * 8}" in log
    compressed, _ = HuffProcessor.compress_bytes(data)
    _, log = HuffProcessor.decompress_bytes(compressed)
    assert f"Bits written: {len(data) * 8}" in log
    assert "Size increased by" in log


def test_debug_output(capsys):
    HuffProcessor.compress_bytes(b"debug", debug=DEBUG_LOW)
    printed = capsys.readouterr().out
    assert "Header written" in printed
    assert "code" not in printed

    HuffProcessor.compress_bytes(b"debug", debug=DEBUG_HIGH)
    printed = capsys.readouterr().out
    assert "code 1" in printed or "code 0" in printed


def test_quiet_by_default(capsys):
    compressed, _ = HuffProcessor.compress_bytes(b"quiet")
    HuffProcessor.decompress_bytes(compressed)
    assert capsys.readouterr().out == ""


def test_file_helpers(tmp_path):
    source = tmp_path / "book.txt"
    source.write_bytes(b"It was the best of times, it was the worst of times." * 40)
    packed = tmp_path / "book.txt.hf"
    unpacked = tmp_path / "book.out"

    HuffProcessor.compress_file(str(source), str(packed))
    HuffProcessor.decompress_file(str(packed), str(unpacked))

    assert packed.stat().st_size < source.stat().st_size
    assert unpacked.read_bytes() == source.read_bytes()


def test_decompress_debug_prints_header_leaves(capsys):
    compressed, _ = HuffProcessor.compress_bytes(b"b")
    capsys.readouterr()

    HuffProcessor.decompress_bytes(compressed, debug=DEBUG_HIGH)
    printed = capsys.readouterr().out
    assert "leaf  98 code 0" in printed
    assert f"leaf {PSEUDO_EOF} code 1" in printed
    assert "trailing padding bits" in printed

    HuffProcessor.decompress_bytes(compressed, debug=DEBUG_LOW)
    assert "leaf" not in capsys.readouterr().out.replace("leaves", "")


@pytest.mark.parametrize("error, kind", [
    (HuffException, None),
    (FormatError, ErrorKind.FORMAT),
    (TruncatedHeaderError, ErrorKind.TRUNCATED_HEADER),
    (TruncatedBodyError, ErrorKind.TRUNCATED_BODY),
])
def test_error_kinds(error, kind):
    assert error.kind is kind
    assert error("message").kind is kind
