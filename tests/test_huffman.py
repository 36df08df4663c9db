import pytest

from huffpress.huffman import HuffmanTree, Node


def _freqs(**counts):
    table = [0] * 256
    for letter, count in counts.items():
        table[ord(letter)] = count
    return table


@pytest.fixture
def sample_tree():
    return HuffmanTree(_freqs(A=2, B=8, C=1, D=1))


def test_sample_codes(sample_tree):
    codes = sample_tree.codes()
    assert codes == {
        ord("A"): (False, False),
        ord("B"): (True,),
        ord("C"): (False, True, False),
        ord("D"): (False, True, True),
    }


def test_sample_compress_bits(sample_tree):
    bits = sample_tree.compress(b"ABBC")
    assert "".join("1" if b else "0" for b in bits) == "0011010"


def test_sample_round_trip(sample_tree):
    assert sample_tree.decompress(sample_tree.compress(b"ABBC")) == b"ABBC"


def test_codes_are_prefix_free():
    table = [0] * 256
    for symbol in range(256):
        table[symbol] = (symbol * 37) % 91 + 1
    codes = HuffmanTree(table).codes()
    assert len(codes) == 256
    values = list(codes.values())
    for code in values:
        for other in values:
            if code is not other:
                assert other[: len(code)] != code


def test_more_frequent_symbol_never_longer():
    codes = HuffmanTree(_freqs(A=2, B=8, C=1, D=1)).codes()
    assert len(codes[ord("B")]) <= len(codes[ord("A")]) <= len(codes[ord("C")])


def test_round_trip_all_bytes():
    data = bytes(range(256)) * 3 + b"hello world" * 10
    table = [0] * 256
    for byte in data:
        table[byte] += 1
    tree = HuffmanTree(table)
    assert tree.decompress(tree.compress(data)) == data


def test_single_symbol_tree_uses_one_bit():
    tree = HuffmanTree(_freqs(Z=5))
    assert tree.codes() == {ord("Z"): (False,)}
    assert tree.compress(b"ZZZ") == [False, False, False]
    assert tree.decompress([False, False, False]) == b"ZZZ"


def test_single_symbol_tree_rejects_right_step():
    tree = HuffmanTree(_freqs(Z=5))
    with pytest.raises(ValueError):
        tree.decompress([True])


def test_empty_tree_does_nothing():
    tree = HuffmanTree([0] * 256)
    assert tree.root is None
    assert tree.codes() == {}
    assert tree.compress(b"abc") == []
    assert tree.decompress([True, False]) == b""


def test_unknown_symbols_are_skipped(sample_tree):
    assert sample_tree.compress(b"AxB") == sample_tree.compress(b"AB")


def test_trailing_partial_code_is_dropped(sample_tree):
    bits = sample_tree.compress(b"ABBC") + [False]
    assert sample_tree.decompress(bits) == b"ABBC"


def test_decompress_empty_bits(sample_tree):
    assert sample_tree.decompress([]) == b""


def test_wrong_table_length_raises():
    with pytest.raises(ValueError):
        HuffmanTree([1] * 255)


def test_node_is_leaf():
    leaf = Node(65, 3)
    parent = Node(0, 3, left=leaf)
    assert leaf.is_leaf() is True
    assert parent.is_leaf() is False


def test_root_weight_is_total_frequency(sample_tree):
    assert sample_tree.root.freq == sum(sample_tree.frequencies)