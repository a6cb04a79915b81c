# filename: huffman_tree_codec.py
#
# Tree grammar, pre-order, one continuous MSB-first bitstream:
#
#   node     := 0 node node             internal
#             | 1 eob_flag value:8      leaf
#
# The EOB leaf still carries an 8-bit value so every leaf is the same width.

from huffman_core import HuffmanInternal, HuffmanLeaf
from huffman_errors import MalformedTreeError

INTERNAL_MARKER = 0
LEAF_MARKER = 1
VALUE_BITS = 8

# 256 byte values plus EOB; a strict binary tree over them is at most 256 deep.
MAX_LEAVES = 257
MAX_TREE_DEPTH = MAX_LEAVES - 1


def write_tree(writer, node) -> int:
    """Serialize ``node`` into ``writer`` and return the number of bits written."""
    if isinstance(node, HuffmanInternal):
        writer.write_bit(INTERNAL_MARKER)
        return 1 + write_tree(writer, node.left) + write_tree(writer, node.right)

    writer.write_bit(LEAF_MARKER)
    writer.write_bit(1 if node.is_eob else 0)
    writer.write_uint(node.value, VALUE_BITS)
    return 2 + VALUE_BITS


def read_tree(reader):
    """Rebuild a tree from ``reader``, leaving it positioned on the first data bit.

    Raises ``OutOfDataError`` if the stream ends inside the tree and
    ``MalformedTreeError`` if the tree is not one ``write_tree`` could produce.
    """
    leaf_count = 0

    def read_node(depth):
        nonlocal leaf_count
        if depth > MAX_TREE_DEPTH:
            raise MalformedTreeError(f"tree deeper than {MAX_TREE_DEPTH} levels")

        if reader.read_bit() == INTERNAL_MARKER:
            left = read_node(depth + 1)
            right = read_node(depth + 1)
            return HuffmanInternal(left, right)

        leaf_count += 1
        if leaf_count > MAX_LEAVES:
            raise MalformedTreeError(f"tree has more than {MAX_LEAVES} leaves")
        is_eob = reader.read_bit() == 1
        value = reader.read_uint(VALUE_BITS)
        return HuffmanLeaf(value, is_eob=is_eob)

    root = read_node(0)
    validate_tree(root)
    return root


def validate_tree(root):
    """Check that ``root`` has exactly one EOB leaf and no repeated symbols."""
    eob_count = 0
    seen = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, HuffmanInternal):
            stack.append(node.right)
            stack.append(node.left)
        elif node.is_eob:
            eob_count += 1
        elif node.value in seen:
            raise MalformedTreeError(f"symbol {node.value} appears twice in tree")
        else:
            seen.add(node.value)

    if eob_count != 1:
        raise MalformedTreeError(f"tree has {eob_count} EOB leaves, expected 1")
