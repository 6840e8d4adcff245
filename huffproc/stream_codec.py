"""
Encoding and decoding the body of a compressed stream.
"""

from huffproc.bit_utils.bit_channel import NO_MORE_BITS, BitInputStream, BitOutputStream
from huffproc.huff_constants import BITS_PER_WORD, PSEUDO_EOF
from huffproc.huff_exceptions import TruncatedBodyError
from huffproc.huffman_coding import Node


def write_compressed_bits(codings: dict[int, str], in_stream: BitInputStream,
                          out: BitOutputStream) -> int:
    """
    Replaces every 8-bit word of the input with its code
    and finishes with the code of PSEUDO_EOF.

    Args:
        codings: Code of every symbol as a string of '0' and '1'
        in_stream: Stream positioned at the start of the data
        out: Stream the codes are written to

    Returns:
        Number of words encoded, PSEUDO_EOF not included
    """
    # int values once, instead of parsing the strings for every word
    table = {symbol: (len(code), int(code, 2)) for symbol, code in codings.items()}

    words = 0
    while True:
        bits = in_stream.read_bits(BITS_PER_WORD)
        if bits == NO_MORE_BITS:
            break
        out.write_bits(*table[bits])
        words += 1

    out.write_bits(*table[PSEUDO_EOF])
    return words


def read_compressed_bits(root: Node, in_stream: BitInputStream, out: BitOutputStream) -> int:
    """
    Walks the tree bit by bit, writing the symbol of every leaf reached,
    until the PSEUDO_EOF leaf is found.

    Args:
        root: Root of the code tree, must not be a leaf
        in_stream: Stream positioned at the first body bit
        out: Stream decoded words are written to

    Returns:
        Number of words decoded

    Raises:
        TruncatedBodyError: If the input ends before PSEUDO_EOF
    """
    words = 0
    current = root
    while True:
        bit = in_stream.read_bits(1)
        # properly compressed files never run out before PSEUDO_EOF
        if bit == NO_MORE_BITS:
            raise TruncatedBodyError(f"input ended after {words} words, no PSEUDO_EOF")

        current = current.left if bit == 0 else current.right

        if current.is_leaf():
            if current.value == PSEUDO_EOF:
                return words
            out.write_bits(BITS_PER_WORD, current.value)
            words += 1
            current = root
