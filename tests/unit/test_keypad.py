"""Тесты для KeypadBuffer: переходы буфера по нажатиям"""

import pytest

from safecalc.evaluator import EvaluatorConfig, ExpressionEvaluator
from safecalc.keypad import buffer as buffer_module
from safecalc.keypad import (
    KEY_BACKSPACE,
    KEY_CLEAR,
    KEY_EQUALS,
    KeypadBuffer,
    map_keyboard_key,
)


def press_all(buffer, tokens):
    transition = None
    for token in tokens:
        transition = buffer.press(token)
        buffer = transition.buffer
    return transition


# =============================================================================
# BUFFER
# =============================================================================


class TestKeypadBuffer:
    def test_append_updates_display(self):
        transition = press_all(KeypadBuffer(), ["2", "+", "3", "*", "4"])
        assert transition.buffer.expression == "2+3*4"
        assert transition.display == "14"
        assert not transition.committed

    def test_incomplete_expression_shows_err(self):
        transition = press_all(KeypadBuffer(), ["2", "+"])
        assert transition.display == "Err"

    def test_clear(self):
        transition = KeypadBuffer("12+3").press(KEY_CLEAR)
        assert transition.buffer.expression == ""
        assert transition.display == "0"

    def test_backspace(self):
        transition = KeypadBuffer("12+3").press(KEY_BACKSPACE)
        assert transition.buffer.expression == "12+"
        assert transition.display == "Err"

    def test_backspace_on_empty(self):
        transition = KeypadBuffer().press(KEY_BACKSPACE)
        assert transition.buffer.expression == ""
        assert transition.display == "0"

    def test_equals_commits_result(self):
        transition = KeypadBuffer("10/4").press(KEY_EQUALS)
        assert transition.committed
        assert transition.buffer.expression == "2.5"
        assert transition.display == "2.5"

    def test_equals_keeps_expression_on_error(self):
        transition = KeypadBuffer("5/0").press(KEY_EQUALS)
        assert not transition.committed
        assert transition.buffer.expression == "5/0"
        assert transition.display == "Err"

    def test_continue_after_commit(self):
        transition = press_all(KeypadBuffer("1-3"), [KEY_EQUALS, "*", "2"])
        assert transition.buffer.expression == "-2*2"
        assert transition.display == "-4"

    def test_buffer_is_immutable(self):
        buffer = KeypadBuffer("1")
        buffer.press("2")
        assert buffer.expression == "1"

    def test_uses_given_evaluator(self):
        evaluator = ExpressionEvaluator(EvaluatorConfig(decimal_places=2))
        transition = KeypadBuffer("10/3").press(KEY_EQUALS, evaluator)
        assert transition.buffer.expression == "3.33"

    def test_default_evaluator_shared(self, monkeypatch):
        """Без явного вычислителя используется DEFAULT_EVALUATOR, новый не создаётся"""
        shared = ExpressionEvaluator(EvaluatorConfig(decimal_places=2))
        monkeypatch.setattr(buffer_module, "DEFAULT_EVALUATOR", shared)

        def fail_construct(*args, **kwargs):
            raise AssertionError("evaluator constructed per keypress")

        monkeypatch.setattr(buffer_module, "ExpressionEvaluator", fail_construct)

        transition = press_all(KeypadBuffer(), ["1", "0", "/", "3", KEY_EQUALS])
        assert transition.buffer.expression == "3.33"
        assert transition.display == "3.33"


# =============================================================================
# KEYBOARD
# =============================================================================


class TestMapKeyboardKey:
    @pytest.mark.parametrize("key,token", [
        ("Enter", KEY_EQUALS),
        ("=", KEY_EQUALS),
        ("Backspace", KEY_BACKSPACE),
        ("Delete", KEY_CLEAR),
        ("c", KEY_CLEAR),
        ("7", "7"),
        ("%", "%"),
        ("(", "("),
        (".", "."),
    ])
    def test_mapped(self, key, token):
        assert map_keyboard_key(key) == token

    @pytest.mark.parametrize("key", ["x", "Shift", "C", " ", "^"])
    def test_ignored(self, key):
        assert map_keyboard_key(key) is None
