"""2D affine transform stack backing the RenderAPI ambient transform."""

from __future__ import annotations

import numpy as np


def _translation(dx: float, dy: float) -> np.ndarray:
    matrix = np.identity(3, dtype=np.float64)
    matrix[0, 2] = dx
    matrix[1, 2] = dy
    return matrix


def _scaling(factor: float) -> np.ndarray:
    matrix = np.identity(3, dtype=np.float64)
    matrix[0, 0] = factor
    matrix[1, 1] = factor
    return matrix


class TransformStack:
    """Current affine transform plus a save/restore stack.

    ``translate`` and ``scale`` post-multiply, so the last operation applied is
    the first one a point goes through, matching canvas-style APIs.
    """

    def __init__(self) -> None:
        self._current = np.identity(3, dtype=np.float64)
        self._saved: list[np.ndarray] = []

    @property
    def depth(self) -> int:
        return len(self._saved)

    def reset(self) -> None:
        self._current = np.identity(3, dtype=np.float64)
        self._saved.clear()

    def save(self) -> None:
        self._saved.append(self._current.copy())

    def restore(self) -> None:
        if not self._saved:
            raise RuntimeError("restore() without matching save()")
        self._current = self._saved.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._current = self._current @ _translation(dx, dy)

    def scale(self, factor: float) -> None:
        if factor == 0.0:
            raise ValueError("scale factor must be non-zero")
        self._current = self._current @ _scaling(factor)

    def apply(self, x: float, y: float) -> tuple[float, float]:
        px, py, _ = self._current @ np.array((x, y, 1.0), dtype=np.float64)
        return float(px), float(py)
