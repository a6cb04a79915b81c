# filename: huffman_core.py

from collections import Counter

EOB_PLACEHOLDER_VALUE = 0


class HuffmanLeaf:
    __slots__ = ("value", "is_eob")

    def __init__(self, value, is_eob=False):
        self.value = value
        self.is_eob = is_eob

    def __repr__(self):
        if self.is_eob:
            return "HuffmanLeaf(EOB)"
        return f"HuffmanLeaf({self.value!r})"


class HuffmanInternal:
    __slots__ = ("left", "right")

    def __init__(self, left, right):
        self.left = left
        self.right = right

    def __repr__(self):
        return f"HuffmanInternal({self.left!r}, {self.right!r})"


class WeightedEntry:
    """A subtree and its total count while the tree is being merged."""

    __slots__ = ("node", "weight")

    def __init__(self, node, weight):
        self.node = node
        self.weight = weight


class CodeTable:
    """Byte value -> ``(bits, length)`` code, plus the EOB code."""

    def __init__(self):
        self.codes = {}
        self.eob = None

    def __getitem__(self, value):
        return self.codes[value]

    def __len__(self):
        return len(self.codes)

    def bitstrings(self):
        # '0'/'1' rendering, handy when inspecting a table by eye
        table = {value: format_code(code) for value, code in self.codes.items()}
        table["EOB"] = format_code(self.eob)
        return table


def format_code(code):
    bits, length = code
    return format(bits, f"0{length}b")


class HuffmanLogic:
    def count_frequencies(self, data):
        # Counter keeps first-occurrence order, which the merge relies on
        # for its tie-breaks.
        freqs = Counter(data)
        entries = [WeightedEntry(HuffmanLeaf(byte), count) for byte, count in freqs.items()]
        entries.append(WeightedEntry(HuffmanLeaf(EOB_PLACEHOLDER_VALUE, is_eob=True), 0))
        return entries

    def build_tree(self, data):
        entries = self.count_frequencies(data)

        # Iteratively merge the two lightest entries; list.sort is stable so
        # equal weights keep their insertion/merge order.
        while len(entries) > 1:
            entries.sort(key=lambda entry: entry.weight)
            smallest = entries.pop(0)
            second = entries.pop(0)
            merged = HuffmanInternal(left=second.node, right=smallest.node)
            entries.append(WeightedEntry(merged, smallest.weight + second.weight))

        return entries[0].node

    def generate_codes(self, root):
        table = CodeTable()
        self._assign_codes(table, root, 0, 0)
        return table

    def _assign_codes(self, table, node, bits, length):
        if isinstance(node, HuffmanInternal):
            self._assign_codes(table, node.left, bits << 1, length + 1)
            self._assign_codes(table, node.right, (bits << 1) | 1, length + 1)
            return

        # A lone root leaf (empty input) still needs a one-bit code.
        code = (bits, length) if length else (0, 1)
        if node.is_eob:
            table.eob = code
        else:
            table.codes[node.value] = code
