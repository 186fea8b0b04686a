"""File-copy and stream utilities: copies, encoded text, decompression and hashing."""

from streamkit.compression import DecompressionMethod, coerce_method, decompress_stream
from streamkit.copying import block_copy, buffered_block_copy, byte_copy, line_copy
from streamkit.hashing import calculate_hash, file_hash, resolve_algorithm
from streamkit.text import read_encoded_text, resolve_encoding
from streamkit.validation import validate_paths, validate_source

__version__ = "0.1.0"

__all__ = [
    "DecompressionMethod",
    "block_copy",
    "buffered_block_copy",
    "byte_copy",
    "calculate_hash",
    "coerce_method",
    "decompress_stream",
    "file_hash",
    "line_copy",
    "read_encoded_text",
    "resolve_algorithm",
    "resolve_encoding",
    "validate_paths",
    "validate_source",
]
