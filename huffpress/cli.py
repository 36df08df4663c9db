"""Command line tool and container format for Huffman-compressed files.

Layout: 256 little-endian 32-bit symbol frequencies, the original length,
the number of valid code bits, then the bits packed most significant first.
"""

from __future__ import annotations

import argparse
import struct
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import islice
from pathlib import Path

from .huffman import SYMBOL_COUNT, HuffmanTree

_FREQS = struct.Struct(f"<{SYMBOL_COUNT}i")
_COUNTS = struct.Struct("<ii")
HEADER_SIZE = _FREQS.size + _COUNTS.size


def count_frequencies(data: bytes) -> list[int]:
    """Return how often each of the 256 byte values occurs in ``data``."""
    counts = Counter(data)
    return [counts.get(symbol, 0) for symbol in range(SYMBOL_COUNT)]


def pack_bits(bits: Sequence[bool]) -> bytes:
    """Pack bits into bytes, most significant bit first, zero padded."""
    out = bytearray()
    for start in range(0, len(bits), 8):
        chunk = bits[start:start + 8]
        value = 0
        for bit in chunk:
            value = (value << 1) | (1 if bit else 0)
        out.append(value << (8 - len(chunk)))
    return bytes(out)


def unpack_bits(data: bytes, count: int) -> list[bool]:
    """Return at most ``count`` bits from ``data``, most significant first."""
    every_bit = (bool((byte >> shift) & 1) for byte in data for shift in range(7, -1, -1))
    return list(islice(every_bit, max(count, 0)))


def compress_bytes(data: bytes) -> bytes:
    """Encode ``data`` into the container format."""
    freqs = count_frequencies(data)
    bits = HuffmanTree(freqs).compress(data)
    header = _FREQS.pack(*freqs) + _COUNTS.pack(len(data), len(bits))
    return header + pack_bits(bits)


def decompress_bytes(blob: bytes) -> bytes:
    """Decode a container produced by :func:`compress_bytes`."""
    if len(blob) < HEADER_SIZE:
        raise ValueError(
            f"compressed data is {len(blob)} bytes, header needs {HEADER_SIZE}"
        )
    freqs = _FREQS.unpack_from(blob, 0)
    _original_size, bit_count = _COUNTS.unpack_from(blob, _FREQS.size)
    bits = unpack_bits(blob[HEADER_SIZE:], bit_count)
    return HuffmanTree(freqs).decompress(bits)


def compress_file(source: str | Path, target: str | Path) -> None:
    Path(target).write_bytes(compress_bytes(Path(source).read_bytes()))


def decompress_file(source: str | Path, target: str | Path) -> None:
    Path(target).write_bytes(decompress_bytes(Path(source).read_bytes()))


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="huffpress",
        description="Compress (c) or decompress (d) a file with Huffman coding.",
    )
    parser.add_argument("mode", help="c to compress, d to decompress")
    parser.add_argument("source", help="file to read")
    parser.add_argument("target", help="file to write")
    args = parser.parse_args(None if argv is None else list(argv))

    if args.mode == "c":
        compress_file(args.source, args.target)
    elif args.mode == "d":
        decompress_file(args.source, args.target)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())