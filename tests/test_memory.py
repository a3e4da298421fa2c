import pytest
from hypothesis import given
from hypothesis import strategies as st

from strkit.memory import (
    bzero,
    calloc,
    mem_chr,
    mem_cmp,
    mem_copy,
    mem_move,
    mem_set,
)


def test_mem_set_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = mem_set(buf, ord("z"), 3)
    assert result is buf
    assert buf[:3] == b"zzz"
    assert buf[3:] == b"def"


def test_mem_set_uses_low_byte():
    a = mem_set(bytearray(4), 0x141, 4)
    b = mem_set(bytearray(4), 0x41, 4)
    assert a == b


def test_mem_set_zero_count_leaves_buffer():
    buf = bytearray(b"keep")
    assert mem_set(buf, 0, 0) == bytearray(b"keep")


def test_mem_set_too_long_raises():
    with pytest.raises(IndexError):
        mem_set(bytearray(2), 1, 3)
    with pytest.raises(ValueError):
        mem_set(bytearray(2), 1, -1)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"o"


@given(st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_calloc_size_and_zeroes(nmemb, size):
    buf = calloc(nmemb, size)
    assert len(buf) == nmemb * size
    assert all(byte == 0 for byte in buf)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


@given(st.binary(max_size=30), st.integers(min_value=0, max_value=255))
def test_mem_chr_agrees_with_find(data, c):
    index = mem_chr(data, c, len(data))
    found = data.find(bytes([c]))
    assert index == (None if found == -1 else found)


def test_mem_chr_respects_limit():
    assert mem_chr(b"abcabc", ord("c"), 2) is None
    assert mem_chr(b"abcabc", ord("c"), 3) == 2


def test_mem_cmp_equal_and_zero_count():
    assert mem_cmp(b"same", b"same", 4) == 0
    assert mem_cmp(b"abc", b"xyz", 0) == 0


def test_mem_cmp_returns_byte_difference():
    assert mem_cmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert mem_cmp(b"abd", b"abc", 3) == ord("d") - ord("c")


@given(st.binary(min_size=1, max_size=20), st.binary(min_size=1, max_size=20))
def test_mem_cmp_sign_matches_ordering(first, second):
    n = min(len(first), len(second))
    result = mem_cmp(first, second, n)
    a, b = first[:n], second[:n]
    assert (result > 0) == (a > b)
    assert (result < 0) == (a < b)


def test_mem_copy_copies_prefix():
    dest = bytearray(b"......")
    result = mem_copy(dest, b"abcd", 3)
    assert result is dest
    assert dest == bytearray(b"abc...")


def test_mem_copy_both_none_gives_none():
    assert mem_copy(None, None, 5) is None


def test_mem_copy_one_none_raises():
    with pytest.raises(TypeError):
        mem_copy(bytearray(3), None, 1)


def test_mem_move_forward_overlap():
    original = b"0123456789"
    buf = bytearray(original)
    mem_move(buf, 2, 0, 5)
    assert bytes(buf) == original[:2] + original[0:5] + original[7:]


def test_mem_move_backward_overlap():
    original = b"0123456789"
    buf = bytearray(original)
    mem_move(buf, 0, 3, 5)
    assert bytes(buf) == original[3:8] + original[5:]


def test_mem_move_out_of_range_raises():
    with pytest.raises(IndexError):
        mem_move(bytearray(5), 3, 0, 4)
    with pytest.raises(ValueError):
        mem_move(bytearray(5), -1, 0, 1)