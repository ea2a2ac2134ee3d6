from __future__ import annotations

import os

from line_numbers import LineIndex
from line_numbers.testing import generate_buffers, naive_line_and_column


def test_generated_corpus_matches_naive_scan() -> None:
    seed = int(os.environ.get("LINE_NUMBERS_CORPUS_SEED", "1"))
    count = int(os.environ.get("LINE_NUMBERS_CORPUS_CASES", "200"))

    buffers = generate_buffers(seed=seed, count=count)
    assert len(buffers) == count
    for i, text in enumerate(buffers):
        data = text.encode("utf-8")
        index = LineIndex.from_text(text)
        assert len(index) == data.count(b"\n") + 1, f"case {i}"
        assert index.max_offset == len(data), f"case {i}"
        for offset in range(len(data) + 1):
            line, column = index.from_offset(offset)
            assert (line.as_index(), column) == naive_line_and_column(data, offset), f"case {i} offset {offset}"


def test_generated_corpus_is_deterministic() -> None:
    assert generate_buffers(seed=7, count=20) == generate_buffers(seed=7, count=20)
    assert generate_buffers(seed=7, count=20) != generate_buffers(seed=8, count=20)


def test_naive_line_and_column() -> None:
    data = b"foo\nbar\nbaz\n"
    assert naive_line_and_column(data, 0) == (0, 0)
    assert naive_line_and_column(data, 3) == (0, 3)
    assert naive_line_and_column(data, 5) == (1, 1)
    assert naive_line_and_column(data, 12) == (3, 0)
