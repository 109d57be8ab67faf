import string

import pytest

from scutil.hashing import hash_32, hash_64, murmurhash


def test_murmurhash_empty_is_zero():
    assert murmurhash("") == 0


def test_murmurhash_str_and_bytes_agree():
    for word in ["jack", "jane", "janie", "chicago", "new york"]:
        assert murmurhash(word) == murmurhash(word.encode("utf-8"))


def test_murmurhash_is_deterministic():
    first = murmurhash("abcdefghijklmnop")
    results = {murmurhash("abcdefghijklmnop") for _ in range(5)}
    assert results == {first}
    assert 0 <= first <= 0xFFFFFFFF
    assert first != murmurhash("abcdefghijklmnoq")


@pytest.mark.parametrize("length", range(1, 25))
def test_murmurhash_fits_32_bits_for_every_tail_length(length):
    value = murmurhash("x" * length)
    assert 0 <= value <= 0xFFFFFFFF


@pytest.mark.parametrize("length", range(1, 20))
def test_murmurhash_last_byte_matters(length):
    base = "a" * length
    changed = "a" * (length - 1) + "b"
    assert murmurhash(base) != murmurhash(changed)


def test_murmurhash_distinct_on_sample():
    alphabet = string.ascii_letters + string.digits
    keys = {a + b + c for a in alphabet[:10] for b in alphabet[:10] for c in alphabet[:10]}
    hashes = {murmurhash(key) for key in keys}
    assert len(hashes) == len(keys)


def test_murmurhash_rejects_none():
    with pytest.raises(TypeError):
        murmurhash(None)


@pytest.mark.parametrize("value", [0, 1, 100, 0xFFFFFFFF])
def test_hash_32_is_identity(value):
    assert hash_32(value) == value


@pytest.mark.parametrize("value", [0, 1, 100, 44444, 0xFFFFFFFF])
def test_hash_64_small_values_unchanged(value):
    assert hash_64(value) == value


def test_hash_64_is_symmetric_in_halves():
    high, low = 0x12345678, 0x9ABCDEF0
    assert hash_64((high << 32) | low) == hash_64((low << 32) | high)


def test_hash_64_equal_halves_cancel():
    half = 0xDEADBEEF
    assert hash_64((half << 32) | half) == 0


def test_hash_64_fits_32_bits():
    assert 0 <= hash_64(0xFFFFFFFFFFFFFFFF) <= 0xFFFFFFFF