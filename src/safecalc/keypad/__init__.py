"""Keypad — буфер ввода вызывающей стороны (кнопки и клавиатура)."""

from .buffer import (
    KEY_BACKSPACE,
    KEY_CLEAR,
    KEY_EQUALS,
    KeypadBuffer,
    KeypadTransition,
    map_keyboard_key,
)

__all__ = [
    "KEY_BACKSPACE",
    "KEY_CLEAR",
    "KEY_EQUALS",
    "KeypadBuffer",
    "KeypadTransition",
    "map_keyboard_key",
]
