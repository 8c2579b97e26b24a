"""Primitive geometry builders for scene rendering."""

from __future__ import annotations

import numpy as np


def segment_positions(segments: list[tuple[float, float, float, float]], *, z: float) -> np.ndarray:
    """Build ``(2n, 3)`` line-segment positions from ``(x0, y0, x1, y1)`` tuples."""
    if not segments:
        return np.zeros((0, 3), dtype=np.float32)
    flat = np.asarray(segments, dtype=np.float32).reshape(-1, 2)
    depth = np.full((flat.shape[0], 1), z, dtype=np.float32)
    return np.hstack((flat, depth))


def approximate_text_extent(text: str, font_size: float) -> tuple[float, float]:
    """Estimate rendered text size for a monospace-ish sans font."""
    lines = text.split("\n") or [""]
    widest = max(len(line) for line in lines)
    return widest * font_size * 0.6, len(lines) * font_size * 1.2
