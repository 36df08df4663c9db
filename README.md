# huffpress

Huffman coding for arbitrary bytes. Build a code tree from symbol
frequencies, turn data into a stream of bits and back again, or compress
whole files from the command line.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Compress a file:

```
huffpress c notes.txt notes.huff
```

Restore it:

```
huffpress d notes.huff notes.txt
```

The first argument picks the mode: `c` compresses the file named by the
second argument into the file named by the third, `d` does the reverse.
Any other mode is accepted but does nothing. The same command is available
as `python -m huffpress.cli`.

### Compressed file layout

A compressed file holds, in order:

1. the frequency of each of the 256 byte values, as little-endian signed
   32-bit integers;
2. the length of the original data, as a little-endian signed 32-bit integer;
3. the number of meaningful bits in the encoded stream, as a little-endian
   signed 32-bit integer;
4. the encoded bits, packed eight to a byte, most significant bit first,
   with the last byte padded with zero bits.

Because the frequency table travels with the data, the decompressor rebuilds
exactly the same tree the compressor used. The stored original length is
written for reference; decoding relies on the bit count alone. Data too large
for these 32-bit fields cannot be stored.

## Library use

Working with whole byte strings (`huffpress.cli`):

```python
from huffpress.cli import compress_bytes, decompress_bytes

blob = compress_bytes(b"abracadabra")
assert decompress_bytes(blob) == b"abracadabra"
```

`decompress_bytes` raises `ValueError` when the data is shorter than the
header. `compress_file(source, target)` and `decompress_file(source, target)`
do the same for paths.

Working with the tree directly (`huffpress.huffman`):

```python
from huffpress.huffman import HuffmanTree

frequencies = [0] * 256
frequencies[ord("A")] = 2
frequencies[ord("B")] = 8
frequencies[ord("C")] = 1
frequencies[ord("D")] = 1

tree = HuffmanTree(frequencies)
bits = tree.compress(b"ABBC")          # list of bools, False = left, True = right
assert tree.decompress(bits) == b"ABBC"

print(tree.codes())   # {symbol: tuple of bools} for every symbol in the tree
```

Notes on `HuffmanTree`:

- It needs exactly 256 frequencies; any other count raises `ValueError`.
- The frequencies need not match the data being encoded; matching them
  simply gives the shortest output.
- Bytes whose frequency is zero have no code and are left out of the
  compressed stream.
- When only one symbol has a non-zero frequency it still gets a one-bit
  code, so the stream can be decoded.
- With no non-zero frequency at all, `compress` returns an empty list and
  `decompress` returns `b""`.
- `decompress` drops a trailing incomplete code and raises `ValueError` if
  the bits lead off the tree.

The helpers `count_frequencies`, `pack_bits` and `unpack_bits` in
`huffpress.cli` expose the individual steps used by the file format.

`huffpress.priority_queue.PriorityQueue` is the binary heap used to build
the tree. It orders items with a caller-supplied `higher(a, b)` predicate and
offers `push`, `top`, `pop` and `len()`; `top` and `pop` raise `IndexError`
when the queue is empty.