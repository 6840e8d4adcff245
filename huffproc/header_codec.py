"""
Storing the Huffman tree in the compressed file.

The tree is written in preorder. An internal node is a single 0 bit
followed by its left and right subtrees, a leaf is a single 1 bit
followed by its symbol in BITS_PER_WORD + 1 bits.
"""

from huffproc.bit_utils.bit_channel import NO_MORE_BITS, BitInputStream, BitOutputStream
from huffproc.huff_constants import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF
from huffproc.huff_exceptions import FormatError, TruncatedHeaderError
from huffproc.huffman_coding import Node

SYMBOL_BITS = BITS_PER_WORD + 1


def write_header(root: Node, out: BitOutputStream) -> None:
    """
    Writes the tree rooted at root to the output stream.

    Args:
        root: Root of the tree to store
        out: Stream the header bits go to
    """
    if root.is_leaf():
        out.write_bits(1, 1)
        out.write_bits(SYMBOL_BITS, root.value)
    else:
        out.write_bits(1, 0)
        write_header(root.left, out)
        write_header(root.right, out)


def read_header(in_stream: BitInputStream) -> Node:
    """
    Reads a tree written by write_header.

    Args:
        in_stream: Stream positioned at the first header bit

    Returns:
        Root of the tree, leaf weights are 0

    Raises:
        TruncatedHeaderError: If the stream ends inside the header
        FormatError: If the header can't describe a usable code tree
    """
    seen = set()
    root = _read_node(in_stream, 0, seen)
    if root.is_leaf():
        raise FormatError("header tree has no internal node")
    if PSEUDO_EOF not in seen:
        raise FormatError("header tree has no PSEUDO_EOF leaf")
    return root


def _read_node(in_stream: BitInputStream, depth: int, seen: set) -> Node:
    # a tree of ALPH_SIZE + 1 leaves is never deeper than ALPH_SIZE
    if depth > ALPH_SIZE:
        raise FormatError(f"header tree deeper than {ALPH_SIZE} levels")

    bit = in_stream.read_bits(1)
    if bit == NO_MORE_BITS:
        raise TruncatedHeaderError("input ended while reading the tree header")

    if bit == 0:
        left = _read_node(in_stream, depth + 1, seen)
        right = _read_node(in_stream, depth + 1, seen)
        return Node(0, 0, left, right)

    value = in_stream.read_bits(SYMBOL_BITS)
    if value == NO_MORE_BITS:
        raise TruncatedHeaderError("input ended inside a leaf symbol")
    if value > PSEUDO_EOF:
        raise FormatError(f"header leaf holds symbol {value} outside 0..{PSEUDO_EOF}")
    # every symbol, PSEUDO_EOF included, has exactly one leaf
    if value in seen:
        raise FormatError(f"header holds symbol {value} more than once")
    seen.add(value)
    return Node(value, 0)
