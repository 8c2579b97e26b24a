"""Pooled retained-node operations for SceneRenderer."""

from __future__ import annotations

from typing import Any, cast

import numpy as np


def hide_unused_nodes(nodes: list[Any], used: int) -> None:
    """Hide pooled nodes past the number used this frame."""
    for node in nodes[used:]:
        node.visible = False


def upsert_rect(
    *,
    gfx: Any,
    scene: Any,
    pool: list[Any],
    index: int,
    tx: float,
    ty: float,
    tw: float,
    th: float,
    color: str,
    z: float,
) -> None:
    """Place pooled rectangle ``index`` at a screen-space box, creating it if needed."""
    if index < len(pool):
        node = pool[index]
        node.material.color = cast(Any, color)
    else:
        node = gfx.Mesh(gfx.plane_geometry(1.0, 1.0), gfx.MeshBasicMaterial(color=cast(Any, color)))
        scene.add(node)
        pool.append(node)
    node.local.position = (tx + tw / 2.0, ty + th / 2.0, z)
    node.local.scale = (max(tw, 1e-6), max(th, 1e-6), 1.0)
    node.visible = True


def upsert_text(
    *,
    gfx: Any,
    scene: Any,
    pool: list[Any],
    index: int,
    text: str,
    tx: float,
    ty: float,
    font_size: float,
    color: str,
    z: float,
) -> None:
    """Place pooled text node ``index``, creating it if needed."""
    color_value = cast(Any, color)
    if index < len(pool):
        node = pool[index]
        node.set_text(text)
        if hasattr(node, "font_size"):
            node.font_size = font_size
        node.material.color = color_value
    else:
        node = gfx.Text(
            text=text,
            font_size=font_size,
            screen_space=True,
            anchor="top-left",
            material=gfx.TextMaterial(color=color_value),
        )
        scene.add(node)
        pool.append(node)
    node.local.position = (tx, ty, z)
    node.visible = True


def upsert_line_batch(
    *,
    gfx: Any,
    scene: Any,
    nodes: dict[tuple[str, float], Any],
    key: tuple[str, float],
    positions: np.ndarray,
) -> None:
    """Create or update one batched line-segment node per (color, width)."""
    color, width = key
    geometry = gfx.Geometry(positions=positions)
    if key in nodes:
        node = nodes[key]
        node.geometry = geometry
    else:
        material = gfx.LineSegmentMaterial(
            color=cast(Any, color), thickness=width, thickness_space="screen"
        )
        node = gfx.Line(geometry, material)
        scene.add(node)
        nodes[key] = node
    node.visible = True
