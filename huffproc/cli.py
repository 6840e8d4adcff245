"""
Command line entry point for the Huffman compressor
"""
import argparse
import os
import sys

from huffproc.huff_exceptions import HuffException
from huffproc.huff_processor import HuffProcessor

HUFF_EXTENSION = ".hf"
UNHUFF_EXTENSION = ".uhf"


def process_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="huffproc", description="Huffman coding based compressor"
    )
    parser.add_argument("filename", type=str)
    parser.add_argument("-d", "--decompress", action="store_true")
    parser.add_argument("-o", "--output", type=str, default=None)
    parser.add_argument(
        "--debug", type=int, default=0, help="1 prints each step, 4 also prints every code"
    )
    return parser.parse_args(argv)


def default_output(filename: str, decompress: bool) -> str:
    """
    Output name used when none is given: compressing appends .hf,
    decompressing strips .hf or appends .uhf.
    """
    if not decompress:
        return filename + HUFF_EXTENSION
    base, ext = os.path.splitext(filename)
    if ext == HUFF_EXTENSION:
        return base
    return filename + UNHUFF_EXTENSION


def main(argv=None) -> int:
    args = process_args(argv)
    output = args.output or default_output(args.filename, args.decompress)

    try:
        if args.decompress:
            log = HuffProcessor.decompress_file(args.filename, output, debug=args.debug)
        else:
            log = HuffProcessor.compress_file(args.filename, output, debug=args.debug)
    except (HuffException, OSError) as e:
        print(f"huffproc: {e}", file=sys.stderr)
        return 1

    print(f"{args.filename} -> {output}")
    print(log)
    return 0


if __name__ == "__main__":
    sys.exit(main())
