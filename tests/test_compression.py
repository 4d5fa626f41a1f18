import os

from rldpnet.compression import compress, decompress


def test_correct_compression():
    data = os.urandom(1000)
    compressed = compress(data)
    assert decompress(compressed) == data


def test_compressed_payload_is_tagged():
    compressed = compress(b"a" * 1000)
    assert compressed[-1] == 0x80
    assert len(compressed) < 1000
    assert decompress(compressed) == b"a" * 1000


def test_short_data_left_as_is():
    data = b"x" * 256
    assert compress(data) == data


def test_data_just_over_threshold_compressed():
    data = bytes(range(256)) + b"z"
    compressed = compress(data)
    assert compressed != data
    assert decompress(compressed) == data


def test_untagged_data_not_decompressed():
    assert decompress(b"plain data") is None
    assert decompress(b"") is None


def test_invalid_frame_rejected():
    assert decompress(b"abc\x80") is None


def test_tag_only_rejected():
    assert decompress(b"\x80") is None


def test_corrupted_trailer_rejected():
    compressed = bytearray(compress(b"b" * 600))
    compressed[-1] = 0x81
    assert decompress(bytes(compressed)) is None