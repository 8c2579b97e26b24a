"""Tileyard application layer: session, frame driver, engine adapter."""

from tileyard.app.frame import FrameDriver
from tileyard.app.keymap import KeyAction, KeyBindings
from tileyard.app.module import TileyardModule, create_module
from tileyard.app.session import Session, cursor_for_tool

__all__ = [
    "FrameDriver",
    "KeyAction",
    "KeyBindings",
    "Session",
    "TileyardModule",
    "create_module",
    "cursor_for_tool",
]
