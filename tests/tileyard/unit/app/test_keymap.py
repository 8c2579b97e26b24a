from __future__ import annotations

from tileyard.app.keymap import KeyAction, KeyBindings, kind_for_action
from tileyard.core.models import EntityKind
from tileyard.infra.config import AppConfig


def test_default_bindings() -> None:
    bindings = KeyBindings()
    assert bindings.action_for("s") is KeyAction.SELECT_STORE
    assert bindings.action_for("T") is KeyAction.SELECT_TRACK
    assert bindings.action_for("Escape") is KeyAction.CANCEL
    assert bindings.action_for("x") is None


def test_bindings_from_config() -> None:
    bindings = KeyBindings.from_config(AppConfig(key_store="q", key_track="w"))
    assert bindings.action_for("Q") is KeyAction.SELECT_STORE
    assert bindings.action_for("w") is KeyAction.SELECT_TRACK
    assert bindings.action_for("s") is None


def test_bindings_from_colliding_env_keep_both_tools_reachable() -> None:
    config = AppConfig.from_env(env={"TILEYARD_KEY_STORE": "q", "TILEYARD_KEY_TRACK": "q"})
    bindings = KeyBindings.from_config(config)
    assert bindings.action_for("s") is KeyAction.SELECT_STORE
    assert bindings.action_for("t") is KeyAction.SELECT_TRACK


def test_kind_for_action() -> None:
    assert kind_for_action(KeyAction.SELECT_STORE) is EntityKind.STORE
    assert kind_for_action(KeyAction.SELECT_TRACK) is EntityKind.TRACK
    assert kind_for_action(KeyAction.CANCEL) is None
