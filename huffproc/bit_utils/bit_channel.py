"""
Bit-level input and output channels over byte streams.
Bits are kept in MSB-first order: the first bit written is the
most significant bit of the first byte.
"""
from typing import BinaryIO, Union

from bitarray import bitarray
from bitarray.util import ba2int, int2ba

# returned by read_bits when the stream can't supply the requested bits
NO_MORE_BITS = -1

# whole bytes kept in memory before BitOutputStream writes them through
WRITE_CHUNK = 4096


class BitInputStream:
    """
    A class for reading bits from a byte source.
    The whole source is loaded into a bitarray, so the stream can be
    rewound and read again.
    """

    def __init__(self, source: Union[BinaryIO, bytes, bitarray]) -> None:
        """
        Initialize BitInputStream from a binary stream, bytes or a bitarray.

        Args:
            source: Binary stream opened for reading, raw bytes,
                or a bitarray holding the exact bits to read
        """
        if isinstance(source, bitarray):
            self.bits = bitarray(source, endian="big")
        else:
            self.bits = bitarray(endian="big")
            if isinstance(source, (bytes, bytearray, memoryview)):
                self.bits.frombytes(bytes(source))
            else:
                self.bits.frombytes(source.read())
        self.pos = 0

    @property
    def bits_read(self) -> int:
        """Number of bits consumed since the last reset."""
        return self.pos

    def __len__(self) -> int:
        return len(self.bits)

    def read_bits(self, n: int) -> int:
        """
        Read n bits in MSB-first order and return them as an integer.

        Args:
            n: Number of bits to read

        Returns:
            The value as an unsigned integer, or NO_MORE_BITS if fewer
            than n bits are left. The position does not move in that case.

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError("Length cannot be negative")
        if self.pos + n > len(self.bits):
            return NO_MORE_BITS
        if n == 0:
            return 0
        val = ba2int(self.bits[self.pos:self.pos + n])
        self.pos += n
        return val

    def reset(self) -> None:
        """Move the position back to the first bit."""
        self.pos = 0

    def close(self) -> None:
        """Nothing to release, the source is owned by the caller."""


class BitOutputStream:
    """
    A class for writing bits to a binary stream.
    Full bytes are written through to the stream as the buffer fills,
    the trailing partial byte is padded with zeros on close().
    """

    def __init__(self, out_stream: BinaryIO) -> None:
        """
        Args:
            out_stream: Binary stream opened for writing
        """
        self.out_stream = out_stream
        self.bits = bitarray(endian="big")
        self.bits_written = 0
        self.closed = False

    def write_bits(self, n: int, value: int) -> None:
        """
        Write the low n bits of value, most significant bit first.

        Args:
            n: Number of bits to write
            value: Integer holding the bits

        Raises:
            ValueError: If n is negative or the stream is closed
        """
        if n < 0:
            raise ValueError("Length cannot be negative")
        if self.closed:
            raise ValueError("Write to a closed bit stream")
        if n == 0:
            return
        self.bits.extend(int2ba(value & ((1 << n) - 1), length=n, endian="big"))
        self.bits_written += n
        if len(self.bits) >= WRITE_CHUNK * 8:
            self._write_through()

    def _write_through(self) -> None:
        whole = len(self.bits) - len(self.bits) % 8
        if whole:
            self.out_stream.write(self.bits[:whole].tobytes())
            del self.bits[:whole]

    def close(self) -> None:
        """
        Pad the last byte with zero bits, write everything out and flush.
        Calling close() again does nothing.
        """
        if self.closed:
            return
        self.bits.fill()
        self._write_through()
        self.out_stream.flush()
        self.closed = True
