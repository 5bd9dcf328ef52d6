import pytest

from dfalex.buffer import (
    BufferEmptyError,
    BufferFullError,
    CircularBuffer,
    SourceFilter,
)


def _filtered(text, keep_single_space=False):
    source = SourceFilter(keep_single_space=keep_single_space)
    return "".join(c for c in (source.feed(ch) for ch in text) if c is not None)


def test_new_buffer_is_empty():
    buffer = CircularBuffer(5)
    assert buffer.is_empty()
    assert not buffer.is_full()
    assert len(buffer) == 0


def test_push_pop_is_fifo():
    buffer = CircularBuffer(5)
    for ch in "abc":
        buffer.push(ch)
    assert [buffer.pop() for _ in range(3)] == list("abc")
    assert buffer.is_empty()


def test_capacity_is_one_less_than_size():
    buffer = CircularBuffer(5)
    for ch in "abcd":
        buffer.push(ch)
    assert buffer.is_full()
    assert len(buffer) == buffer.capacity
    with pytest.raises(BufferFullError):
        buffer.push("e")


def test_pop_from_empty_raises():
    buffer = CircularBuffer(5)
    with pytest.raises(BufferEmptyError):
        buffer.pop()


def test_drain_returns_in_order_and_empties():
    buffer = CircularBuffer(5)
    for ch in "xyz":
        buffer.push(ch)
    assert buffer.drain() == list("xyz")
    assert buffer.is_empty()


def test_wraparound_preserves_order():
    buffer = CircularBuffer(5)
    for ch in "abcd":
        buffer.push(ch)
    assert buffer.pop() == "a"
    assert buffer.pop() == "b"
    buffer.push("e")
    buffer.push("f")
    assert buffer.is_full()
    assert buffer.drain() == list("cdef")


def test_too_small_size_rejected():
    with pytest.raises(ValueError):
        CircularBuffer(1)


def test_feed_returns_char_or_none():
    source = SourceFilter(keep_single_space=True)
    for ch in 'ab # c\n"""d"""e  f':
        result = source.feed(ch)
        assert result is None or result == ch


def test_line_comment_is_dropped():
    assert _filtered("# note\nab") == "ab"


def test_block_comment_is_dropped():
    assert _filtered('"""doc"""x') == "x"


def test_single_quotes_are_dropped_but_content_kept():
    assert _filtered('"a"') == "a"


def test_strict_mode_drops_all_spaces_and_newlines():
    result = _filtered("a b\nc  d")
    assert " " not in result
    assert "\n" not in result
    assert result == "abcd"


def test_single_space_mode_collapses_runs():
    assert _filtered("a   b", keep_single_space=True) == "a b"


def test_single_space_mode_drops_newlines():
    result = _filtered("a\nb", keep_single_space=True)
    assert "\n" not in result
    assert result == "ab"