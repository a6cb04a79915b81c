# filename: huffman_cli.py
"""
Round-trip a file through the Huffman codec and report how well it packed.

Usage:
  huffman-eob <input> [-o payload.bin]
  huffman-eob -d <payload.bin> -o <output>
"""

import argparse
import sys

from huffman_errors import HuffmanError
from huffman_service import HuffmanService


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="huffman-eob", description=__doc__.strip().splitlines()[0])
    p.add_argument("path", nargs="?", help="file to compress (or decompress with -d)")
    p.add_argument("-o", "--output", help="where to write the payload / decoded bytes")
    p.add_argument("-d", "--decompress", action="store_true", help="treat <path> as a payload and decode it")
    return p.parse_args(argv)


def report(result):
    print(f"\nOriginal payload: {result.original_size} bytes.")
    print(
        f"tree({result.tree_bits}) bits + data({result.data_bits}) bits = "
        f"{result.total_bits} bits = {result.compressed_size} bytes."
    )
    if result.ratio is None:
        print("Compressed size is n/a for an empty input.")
        return
    print(f"Compressed size is {result.ratio:.2f}% of the original size.")
    print(f"{result.entropy_limit:.2f}% theoretical limit")


def run(args):
    service = HuffmanService()

    with open(args.path, "rb") as f:
        data = f.read()

    if args.decompress:
        decoded = service.decompress(data)
        with open(args.output, "wb") as f:
            f.write(decoded)
        print(f"{len(data)} bytes decoded to {len(decoded)} bytes.")
        return 0

    result = service.compress_with_stats(data)
    decoded = service.decompress(result.payload)
    if decoded != data:
        print("Buffers DO NOT match!")
        return 1
    print("Buffers match.")

    report(result)
    if args.output:
        with open(args.output, "wb") as f:
            f.write(result.payload)
    return 0


def main(argv=None):
    args = parse_args(argv)
    if args.path is None:
        return 0
    if args.decompress and not args.output:
        print("error: --decompress needs --output", file=sys.stderr)
        return 2

    try:
        return run(args)
    except (HuffmanError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
