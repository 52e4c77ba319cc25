"""Tests for nbf/exp validation."""

from datetime import timedelta

import pytest

from jwtcore.core.errors import MalformedTokenError, NotYetValidError, TokenExpiredError
from jwtcore.token.claims import validate_time_claims

NOW = 1_700_000_000


class TestExpiry:
    """Tests for the exp claim."""

    def test_future_exp_passes(self) -> None:
        validate_time_claims({"exp": NOW + 20}, NOW)

    def test_past_exp_fails(self) -> None:
        with pytest.raises(TokenExpiredError) as info:
            validate_time_claims({"exp": NOW - 20}, NOW)
        assert info.value.exp == NOW - 20

    def test_exp_equal_to_now_fails(self) -> None:
        with pytest.raises(TokenExpiredError):
            validate_time_claims({"exp": NOW}, NOW)

    def test_leeway_extends_exp(self) -> None:
        validate_time_claims({"exp": NOW - 20}, NOW, leeway=21)
        validate_time_claims({"exp": NOW - 20}, NOW, leeway=timedelta(seconds=21))
        with pytest.raises(TokenExpiredError):
            validate_time_claims({"exp": NOW - 20}, NOW, leeway=20)


class TestNotBefore:
    """Tests for the nbf claim."""

    def test_past_nbf_passes(self) -> None:
        validate_time_claims({"nbf": NOW - 20}, NOW)

    def test_nbf_equal_to_now_passes(self) -> None:
        validate_time_claims({"nbf": NOW}, NOW)

    def test_future_nbf_fails(self) -> None:
        with pytest.raises(NotYetValidError) as info:
            validate_time_claims({"nbf": NOW + 20}, NOW)
        assert info.value.nbf == NOW + 20

    def test_leeway_moves_nbf(self) -> None:
        validate_time_claims({"nbf": NOW + 20}, NOW, leeway=20)

    def test_nbf_checked_before_exp(self) -> None:
        with pytest.raises(NotYetValidError):
            validate_time_claims({"nbf": NOW + 20, "exp": NOW - 20}, NOW)


class TestClaimShapes:
    """Tests for unusual claim values."""

    @pytest.mark.parametrize("value", ["1700000000", True, [1], {"t": 1}])
    def test_non_numeric_rejected(self, value: object) -> None:
        with pytest.raises(MalformedTokenError):
            validate_time_claims({"exp": value}, NOW)

    def test_float_timestamps(self) -> None:
        validate_time_claims({"nbf": NOW - 0.5, "exp": NOW + 0.5}, NOW)

    def test_non_object_claims_pass(self) -> None:
        validate_time_claims("abc", NOW)
        validate_time_claims([{"exp": 0}], NOW)

    def test_huge_integer_with_float_leeway(self) -> None:
        with pytest.raises(MalformedTokenError):
            validate_time_claims({"exp": 10**400}, NOW, leeway=1.0)
        with pytest.raises(MalformedTokenError):
            validate_time_claims({"nbf": -(10**400)}, NOW, leeway=1.0)

    def test_infinite_timestamp(self) -> None:
        with pytest.raises(MalformedTokenError):
            validate_time_claims({"exp": float("inf")}, NOW)
