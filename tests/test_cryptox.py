import string

import pytest

from gox import cryptox

HEX = set(string.hexdigits.lower())


def test_crc32_standard_check_value():
    assert cryptox.crc32("123456789") == 0xCBF43926


def test_md5_of_empty_string():
    assert cryptox.md5("") == "d41d8cd98f00b204e9800998ecf8427e"


def test_sha1_of_empty_string():
    assert cryptox.sha1("") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


@pytest.mark.parametrize("text", ["", "a", "hello world", "中文"])
def test_crc32_in_unsigned_range_and_stable(text):
    value = cryptox.crc32(text)
    assert 0 <= value <= 0xFFFFFFFF
    assert cryptox.crc32(text) == value


@pytest.mark.parametrize("text", ["a", "hello world", "中文"])
def test_md5_shape(text):
    digest = cryptox.md5(text)
    assert len(digest) == 32
    assert set(digest) <= HEX


@pytest.mark.parametrize("text", ["a", "hello world", "中文"])
def test_sha1_shape(text):
    digest = cryptox.sha1(text)
    assert len(digest) == 40
    assert set(digest) <= HEX


def test_digests_distinguish_inputs():
    assert len({cryptox.md5("a"), cryptox.md5("b")}) == 2
    assert len({cryptox.sha1("a"), cryptox.sha1("b")}) == 2
    assert len({cryptox.crc32("a"), cryptox.crc32("b")}) == 2