from __future__ import annotations

import random
import string


# Multi-byte characters keep byte offsets and character offsets apart.
_WIDE = ["é", "ß", "→", "€", "😀"]
_ENDINGS = ["\n", "\n", "\n", "\r\n"]


def generate_buffers(*, seed: int, count: int) -> list[str]:
    r = random.Random(seed)
    return [_gen_one(r) for _ in range(count)]


def naive_line_and_column(data: bytes, offset: int) -> tuple[int, int]:
    """Reference answer: count newlines before ``offset``."""
    before = data[:offset]
    line = before.count(b"\n")
    return line, offset - (before.rfind(b"\n") + 1)


def _gen_one(r: random.Random) -> str:
    k = r.random()
    if k < 0.05:
        return ""
    if k < 0.10:
        return "\n" * r.randint(1, 4)

    parts: list[str] = []
    for _ in range(r.randint(1, 12)):
        parts.append(_gen_line(r))
        parts.append(r.choice(_ENDINGS))

    # About half the buffers lack a trailing newline.
    if r.random() < 0.5:
        parts.pop()
    return "".join(parts)


def _gen_line(r: random.Random) -> str:
    if r.random() < 0.15:
        return ""
    chars: list[str] = []
    for _ in range(r.randint(1, 40)):
        if r.random() < 0.1:
            chars.append(r.choice(_WIDE))
        else:
            chars.append(r.choice(string.ascii_letters + string.digits + " \t_-(){};"))
    return "".join(chars)
