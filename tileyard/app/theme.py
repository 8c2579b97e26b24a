"""Colors and stroke widths for the placement surface."""

from __future__ import annotations

from dataclasses import dataclass

from tileyard.core.models import EntityKind


@dataclass(frozen=True, slots=True)
class Theme:
    background: str
    grid_minor: str
    grid_major: str
    grid_minor_width: float
    grid_major_width: float
    store_fill: str
    track_fill: str
    store_ghost: str
    track_ghost: str
    hover_fill: str
    hud_bg: str
    hud_text: str
    hud_font_size: float

    def entity_fill(self, kind: EntityKind) -> str:
        return self.store_fill if kind is EntityKind.STORE else self.track_fill

    def ghost_fill(self, kind: EntityKind) -> str:
        return self.store_ghost if kind is EntityKind.STORE else self.track_ghost


DEFAULT_THEME = Theme(
    background="#ffffff",
    grid_minor="#dddddd",
    grid_major="#222222",
    grid_minor_width=1.0,
    grid_major_width=1.5,
    store_fill="#e0a030",
    track_fill="#5a6b7d",
    # Same hues as the committed fills with alpha for the preview.
    store_ghost="#e0a03080",
    track_ghost="#5a6b7d80",
    hover_fill="#3a7bd540",
    hud_bg="#101820c0",
    hud_text="#f4f6f8",
    hud_font_size=14.0,
)
