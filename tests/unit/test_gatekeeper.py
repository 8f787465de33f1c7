"""Тесты для Gatekeeper: порядок гейтов и маппинг на ошибки"""

import pytest

from safecalc.core.domain import NormalizedExpression, ValidatedExpression
from safecalc.core.errors import (
    ErrorKind,
    InvalidCharacter,
    MalformedSequence,
    UnbalancedParentheses,
    ValidationError,
)
from safecalc.gatekeeper import Gatekeeper, validate


@pytest.fixture
def gatekeeper():
    return Gatekeeper()


class TestGatekeeperValidate:
    def test_returns_validated_expression(self, gatekeeper):
        validated = gatekeeper.validate(NormalizedExpression(text="(2+3)*4"))
        assert isinstance(validated, ValidatedExpression)
        assert validated.text == "(2+3)*4"
        assert validated.max_depth == 1

    def test_accepts_plain_string(self, gatekeeper):
        assert gatekeeper.validate("1+1").text == "1+1"

    def test_invalid_character(self, gatekeeper):
        with pytest.raises(InvalidCharacter) as exc_info:
            gatekeeper.validate("2+x")
        assert exc_info.value.kind is ErrorKind.INVALID_CHARACTER
        assert exc_info.value.position == 2

    def test_malformed_sequence(self, gatekeeper):
        with pytest.raises(MalformedSequence) as exc_info:
            gatekeeper.validate("5++3")
        assert exc_info.value.kind is ErrorKind.MALFORMED_SEQUENCE

    def test_unbalanced(self, gatekeeper):
        with pytest.raises(UnbalancedParentheses):
            gatekeeper.validate("(1+2")

    def test_all_are_validation_errors(self, gatekeeper):
        for expression in ("a", "1..2", ")("):
            with pytest.raises(ValidationError):
                gatekeeper.validate(expression)


class TestGateOrder:
    """Первый заблокированный гейт определяет ошибку"""

    def test_allowlist_before_sequence(self):
        with pytest.raises(InvalidCharacter):
            validate("5++x")

    def test_sequence_before_balance(self):
        with pytest.raises(MalformedSequence):
            validate("(5++3")

    def test_allowlist_before_balance(self):
        with pytest.raises(InvalidCharacter):
            validate("(a")
