# filename: huffman_service.py

import math
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from huffman_bitstream import BitReader, BitWriter
from huffman_core import HuffmanLeaf, HuffmanLogic
from huffman_tree_codec import read_tree, write_tree


@dataclass
class EncodeResult:
    payload: bytes
    original_size: int
    tree_bits: int
    data_bits: int  # includes the EOB code
    entropy_limit: Optional[float]

    @property
    def total_bits(self) -> int:
        return self.tree_bits + self.data_bits

    @property
    def compressed_size(self) -> int:
        return (self.total_bits + 7) // 8

    @property
    def ratio(self) -> Optional[float]:
        # compressed size as a percentage of the original
        if not self.original_size:
            return None
        return 100.0 * self.compressed_size / self.original_size


def entropy_limit(data) -> Optional[float]:
    """Shannon bound for ``data`` as a percentage of its original size."""
    if not data:
        return None
    entropy = 0.0
    for count in Counter(data).values():
        p = count / len(data)
        entropy += p * math.log2(p)
    return -entropy * 100 / 8


def _as_bytes(data):
    # Iterating must yield byte values, so views over wider items are flattened.
    if isinstance(data, memoryview):
        return data.tobytes()
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    return data


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def compress(self, data) -> bytes:
        return self.compress_with_stats(data).payload

    def compress_with_stats(self, data) -> EncodeResult:
        data = _as_bytes(data)

        tree = self.logic.build_tree(data)
        codes = self.logic.generate_codes(tree)

        writer = BitWriter()
        tree_bits = write_tree(writer, tree)
        write_code = writer.write_code
        table = codes.codes
        for byte in data:
            write_code(table[byte])
        write_code(codes.eob)
        data_bits = writer.bits_written - tree_bits

        return EncodeResult(
            payload=writer.finish(),
            original_size=len(data),
            tree_bits=tree_bits,
            data_bits=data_bits,
            entropy_limit=entropy_limit(data),
        )

    def decompress(self, payload) -> bytes:
        reader = BitReader(_as_bytes(payload))
        root = read_tree(reader)

        # Empty input: the tree is just the EOB leaf and its code is one bit.
        if isinstance(root, HuffmanLeaf):
            reader.read_bit()
            return b""

        out = bytearray()
        read_bit = reader.read_bit
        node = root
        while True:
            node = node.right if read_bit() else node.left
            if isinstance(node, HuffmanLeaf):
                if node.is_eob:
                    break
                out.append(node.value)
                node = root
        return bytes(out)


def encode(data) -> bytes:
    return HuffmanService().compress(data)


def decode(payload) -> bytes:
    return HuffmanService().decompress(payload)
