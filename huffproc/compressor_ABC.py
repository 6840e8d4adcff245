from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple


class Compressor(ABC):
    """
    Interface describing compression and decompression of files
    with a particular algorithm.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads bytes from the input stream, compresses them and writes
        the compressed data to the output stream.

        Args:
            input_stream: Stream with the data to compress
            output_stream: Stream for the compressed data

        Returns:
            String with information for logging
        """

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads compressed bytes from the input stream, decompresses them and
        writes the original data to the output stream.

        Args:
            input_stream: Stream with the compressed data
            output_stream: Stream for the decompressed data

        Returns:
            String with information for logging
        """

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper method for compressing a file.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file
            **kwargs: Passed to the compressor constructor

        Returns:
            Compression information
        """
        compressor = cls(**kwargs)
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            return compressor.compress(in_file, out_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper method for decompressing a file.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file
            **kwargs: Passed to the compressor constructor

        Returns:
            Decompression information
        """
        compressor = cls(**kwargs)
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            return compressor.decompress(in_file, out_file)

    @classmethod
    def compress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper method for compressing bytes.

        Args:
            data: Data to compress
            **kwargs: Passed to the compressor constructor

        Returns:
            Tuple (compressed data, compression information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper method for decompressing bytes.

        Args:
            data: Compressed data
            **kwargs: Passed to the compressor constructor

        Returns:
            Tuple (decompressed data, decompression information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info
