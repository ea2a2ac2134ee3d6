from __future__ import annotations

from .corpus import generate_buffers, naive_line_and_column

__all__ = ["generate_buffers", "naive_line_and_column"]
