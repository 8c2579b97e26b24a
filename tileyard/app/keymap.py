"""Keyboard shortcut table for tool selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tileyard.core.models import EntityKind
from tileyard.infra.config import CANCEL_KEY, AppConfig


class KeyAction(StrEnum):
    SELECT_STORE = "select_store"
    SELECT_TRACK = "select_track"
    CANCEL = "cancel"


@dataclass(frozen=True, slots=True)
class KeyBindings:
    """Normalized key names mapped to tool actions. Matching is case-insensitive."""

    store: str = "s"
    track: str = "t"
    cancel: str = CANCEL_KEY

    @classmethod
    def from_config(cls, config: AppConfig) -> KeyBindings:
        return cls(store=config.key_store, track=config.key_track)

    def action_for(self, key: str) -> KeyAction | None:
        normalized = key.strip().lower()
        if normalized == self.cancel.lower():
            return KeyAction.CANCEL
        if normalized == self.store.lower():
            return KeyAction.SELECT_STORE
        if normalized == self.track.lower():
            return KeyAction.SELECT_TRACK
        return None


def kind_for_action(action: KeyAction) -> EntityKind | None:
    if action is KeyAction.SELECT_STORE:
        return EntityKind.STORE
    if action is KeyAction.SELECT_TRACK:
        return EntityKind.TRACK
    return None
