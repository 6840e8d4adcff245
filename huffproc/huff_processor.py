"""
Huffman compressor storing its code tree in the file header.

Compressed layout: 32-bit HUFF_TREE magic number, the tree
(see header_codec), then the codes of all input words ending
with the code of PSEUDO_EOF. Nothing is byte aligned except
the very end of the file.
"""
from typing import BinaryIO

from huffproc.bit_utils.bit_channel import NO_MORE_BITS, BitInputStream, BitOutputStream
from huffproc.compressor_ABC import Compressor
from huffproc.header_codec import read_header, write_header
from huffproc.huff_constants import BITS_PER_INT, DEBUG_HIGH, DEBUG_LOW, HUFF_TREE
from huffproc.huff_exceptions import FormatError
from huffproc.huffman_coding import HuffmanTree, read_for_counts
from huffproc.stream_codec import read_compressed_bits, write_compressed_bits


class HuffProcessor(Compressor):
    """
    Compresses and decompresses streams with a static Huffman code
    built from one full pass over the input.
    """

    def __init__(self, debug: int = 0):
        """
        :param debug: int, 0 prints nothing, DEBUG_LOW prints a line per step,
            DEBUG_HIGH also prints the code of every symbol
        """
        self.debug = debug
        self.log = []

    def compress_bits(self, in_stream: BitInputStream, out: BitOutputStream) -> HuffmanTree:
        """
        Compresses everything in in_stream into out and closes out.
        The input is read twice, once for counts and once for encoding.

        :param in_stream: BitInputStream with the data to compress
        :param out: BitOutputStream for the compressed data
        :return: HuffmanTree used for the codes
        """
        counts = read_for_counts(in_stream)
        tree = HuffmanTree.build_from_freq(counts)
        if self.debug >= DEBUG_LOW:
            print(f"Counted {sum(counts) - 1} words, {sum(1 for c in counts if c)} distinct symbols")
            print(f"Tree built: {len(tree.res_codes)} leaves, height {tree.height()}")
        if self.debug >= DEBUG_HIGH:
            for symbol, code in sorted(tree.res_codes.items()):
                print(f"  {symbol:3d} count {counts[symbol]:8d} code {code}")

        out.write_bits(BITS_PER_INT, HUFF_TREE)
        write_header(tree.root, out)
        header_end = out.bits_written
        if self.debug >= DEBUG_LOW:
            print(f"Header written: {header_end - BITS_PER_INT} bits")

        in_stream.reset()
        words = write_compressed_bits(tree.res_codes, in_stream, out)
        if self.debug >= DEBUG_LOW:
            print(f"Body written: {words} words in {out.bits_written - header_end} bits")
        out.close()
        return tree

    def decompress_bits(self, in_stream: BitInputStream, out: BitOutputStream) -> HuffmanTree:
        """
        Decompresses in_stream into out and closes out.

        :param in_stream: BitInputStream with compressed data
        :param out: BitOutputStream for the original data
        :return: HuffmanTree read from the header
        :raises FormatError: the magic number is wrong or the tree is unusable
        :raises TruncatedHeaderError: the input ends inside the tree
        :raises TruncatedBodyError: the input ends before PSEUDO_EOF
        """
        val = in_stream.read_bits(BITS_PER_INT)
        if val == NO_MORE_BITS:
            raise FormatError("input too short for a header")
        # check if compressed file is Huffman encoded
        if val != HUFF_TREE:
            raise FormatError(f"illegal header starts with {val:#x}")

        tree = HuffmanTree.from_root(read_header(in_stream))
        if self.debug >= DEBUG_LOW:
            print(f"Header read: {len(tree.res_codes)} leaves in {in_stream.bits_read - BITS_PER_INT} bits")
        if self.debug >= DEBUG_HIGH:
            for symbol, code in sorted(tree.res_codes.items()):
                print(f"  leaf {symbol:3d} code {code}")

        words = read_compressed_bits(tree.root, in_stream, out)
        if self.debug >= DEBUG_LOW:
            print(f"Body read: {words} words decoded")
        if self.debug >= DEBUG_HIGH:
            print(f"  {len(in_stream) - in_stream.bits_read} trailing padding bits")
        out.close()
        return tree

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Compresses a binary stream into another.

        :return: str, log information
        """
        self.log.clear()
        in_bits = BitInputStream(input_stream)
        out_bits = BitOutputStream(output_stream)
        self.compress_bits(in_bits, out_bits)
        self._log_sizes(in_bits, out_bits, compressing=True)
        return "\n".join(self.log)

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Decompresses a binary stream into another.
        Output written before an error is raised must be discarded.

        :return: str, log information
        """
        self.log.clear()
        in_bits = BitInputStream(input_stream)
        out_bits = BitOutputStream(output_stream)
        self.decompress_bits(in_bits, out_bits)
        self._log_sizes(in_bits, out_bits, compressing=False)
        return "\n".join(self.log)

    def _log_sizes(self, in_bits: BitInputStream, out_bits: BitOutputStream, compressing: bool):
        self.log.append(f"Bits read: {in_bits.bits_read}")
        self.log.append(f"Bits written: {out_bits.bits_written}")

        in_size = len(in_bits) // 8
        out_size = (out_bits.bits_written + 7) // 8
        if compressing:
            diff = in_size - out_size
            ratio = diff / in_size * 100 if in_size else 0
            if diff > 0:
                self.log.append(f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)")
            else:
                self.log.append(f"Size increased by {-diff} bytes")
        else:
            diff = out_size - in_size
            if diff >= 0:
                self.log.append(f"Size increased by {diff} bytes")
            else:
                self.log.append(f"Size reduced by {-diff} bytes")
