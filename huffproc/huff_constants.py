"""
Constants shared by the Huffman compressor and decompressor
"""

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE

# magic number at the start of every compressed file,
# low bit set means the code tree is stored in the header
HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1

DEBUG_LOW = 1
DEBUG_HIGH = 4
