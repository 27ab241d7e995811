from anttools import hashing


def test_md5():
    assert hashing.md5("test") == "098f6bcd4621d373cade4e832627b4f6"


def test_sha1():
    assert hashing.sha1("test") == "a94a8fe5ccb19ba61c4c0873d391e987982fbbd3"


def test_sha256():
    assert hashing.sha256("test") == "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08"


def test_crc32():
    assert hashing.crc32("test") == 0xD87F7E0C


def test_bytes_and_str_agree():
    assert hashing.md5(b"test") == hashing.md5("test")
    assert hashing.crc32(b"test") == hashing.crc32("test")