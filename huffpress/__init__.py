"""Huffman coding of byte streams and files, with a compress/decompress command."""

__version__ = "0.1.0"