import os
import random
import sys

SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC not in sys.path:
	sys.path.insert(0, SRC)

from huffman_core import HuffmanInternal, HuffmanLeaf, HuffmanLogic, format_code


def _leaves(node):
	if isinstance(node, HuffmanInternal):
		return _leaves(node.left) + _leaves(node.right)
	return [node]


def _assert_prefix_free(table):
	codes = list(table.bitstrings().values())
	assert len(set(codes)) == len(codes)
	for a in codes:
		for b in codes:
			if a is not b:
				assert not b.startswith(a), (a, b)


def test_frequencies_keep_first_occurrence_order():
	entries = HuffmanLogic().count_frequencies(b'BAAB')
	assert [(e.node.value, e.weight) for e in entries[:-1]] == [(66, 2), (65, 2)]
	eob = entries[-1]
	assert eob.node.is_eob
	assert eob.weight == 0


def test_empty_input_tree_is_lone_eob_leaf():
	logic = HuffmanLogic()
	root = logic.build_tree(b'')
	assert isinstance(root, HuffmanLeaf)
	assert root.is_eob
	table = logic.generate_codes(root)
	assert len(table) == 0
	assert format_code(table.eob) == '0'


def test_single_repeated_byte_gets_one_bit_codes():
	logic = HuffmanLogic()
	root = logic.build_tree(b'A' * 100)
	assert isinstance(root, HuffmanInternal)
	assert root.left.value == 0x41
	assert root.right.is_eob
	table = logic.generate_codes(root)
	assert table.bitstrings() == {0x41: '0', 'EOB': '1'}


def test_mixed_frequencies_favor_common_byte():
	logic = HuffmanLogic()
	table = logic.generate_codes(logic.build_tree(b'AAAB'))
	assert table.bitstrings() == {65: '0', 66: '10', 'EOB': '11'}
	assert table[65][1] < table[66][1]


def test_equal_weights_follow_merge_order():
	# EOB (0) pairs with A first, then B joins the merged node.
	logic = HuffmanLogic()
	root = logic.build_tree(b'AB')
	assert isinstance(root.left, HuffmanInternal)
	assert root.right.value == 66
	assert logic.generate_codes(root).bitstrings() == {65: '00', 66: '1', 'EOB': '01'}


def test_tree_leaves_match_distinct_bytes():
	data = b'mississippi river'
	leaves = _leaves(HuffmanLogic().build_tree(data))
	assert sum(1 for leaf in leaves if leaf.is_eob) == 1
	assert sorted(leaf.value for leaf in leaves if not leaf.is_eob) == sorted(set(data))


def test_all_byte_values_prefix_free():
	logic = HuffmanLogic()
	table = logic.generate_codes(logic.build_tree(bytes(range(256))))
	assert len(table) == 256
	_assert_prefix_free(table)


def test_random_tables_prefix_free():
	rng = random.Random(1234)
	logic = HuffmanLogic()
	for n in (1, 7, 64, 1000):
		data = bytes(rng.choice(b'abcdefghij\x00\xff') for _ in range(n))
		_assert_prefix_free(logic.generate_codes(logic.build_tree(data)))


def test_build_is_deterministic():
	logic = HuffmanLogic()
	data = b'the quick brown fox jumps over the lazy dog'
	a = logic.generate_codes(logic.build_tree(data)).bitstrings()
	b = logic.generate_codes(logic.build_tree(data)).bitstrings()
	assert a == b
