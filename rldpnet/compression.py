"""Optional zstd compression of transfer payloads."""

import io
from typing import Optional

import zstandard

COMPRESSION_THRESHOLD = 256
COMPRESSION_LEVEL = 3
TAG_COMPRESSED = 0x80


def compress(data: bytes) -> bytes:
    """Compress ``data`` if it is longer than the threshold.

    The result is a zstd frame with the data, a zstd frame with its
    big-endian 32-bit length, and a trailing tag byte. Short data is
    returned unchanged.
    """
    data = bytes(data)
    if len(data) <= COMPRESSION_THRESHOLD:
        return data

    compressor = zstandard.ZstdCompressor(level=COMPRESSION_LEVEL)
    length = (len(data) & 0xFFFFFFFF).to_bytes(4, "big")
    return compressor.compress(data) + compressor.compress(length) + bytes([TAG_COMPRESSED])


def decompress(data: bytes) -> Optional[bytes]:
    """Return the original payload, or None if ``data`` is not a valid compressed payload."""
    data = bytes(data)
    if not data or data[-1] != TAG_COMPRESSED:
        return None

    try:
        decoded = _decode_all(data[:-1])
    except zstandard.ZstdError:
        return None

    if len(decoded) < 4:
        return None
    src_len = int.from_bytes(decoded[-4:], "big")
    if src_len != len(decoded) - 4:
        return None
    return decoded[:src_len]


def _decode_all(payload: bytes) -> bytes:
    chunks = []
    reader = zstandard.ZstdDecompressor().stream_reader(
        io.BytesIO(payload), read_across_frames=True
    )
    with reader:
        while True:
            chunk = reader.read(65536)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)