"""
Errors raised while decompressing a Huffman-coded stream.
"""
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Tag identifying which kind of failure stopped decompression."""

    FORMAT = "format"
    TRUNCATED_HEADER = "truncated_header"
    TRUNCATED_BODY = "truncated_body"


class HuffException(Exception):
    """Base class for all decompression failures."""

    kind: Optional[ErrorKind] = None


class FormatError(HuffException):
    """
    Input does not start with the expected magic number,
    or the stored tree cannot describe a valid code.
    """

    kind = ErrorKind.FORMAT


class TruncatedHeaderError(HuffException):
    """Input ended while the code tree was still being read."""

    kind = ErrorKind.TRUNCATED_HEADER


class TruncatedBodyError(HuffException):
    """Input ended before the end-of-stream code was decoded."""

    kind = ErrorKind.TRUNCATED_BODY
