"""Unit tests for the Result type."""

from __future__ import annotations

import pytest

from vault_kv.kernel.types import Err, Ok


class TestOk:
    def test_flags(self) -> None:
        assert Ok(1).is_ok()
        assert not Ok(1).is_err()

    def test_unwrap_and_unwrap_or(self) -> None:
        assert Ok("v").unwrap() == "v"
        assert Ok("v").unwrap_or("d") == "v"

    def test_none_is_a_valid_success(self) -> None:
        assert Ok(None).is_ok()
        assert Ok(None).unwrap() is None

    def test_map_and_flat_map(self) -> None:
        assert Ok(2).map(lambda v: v * 3) == Ok(6)
        assert Ok(2).flat_map(lambda v: Err(ValueError(str(v)))).is_err()

    def test_as_completion(self) -> None:
        assert Ok("state").as_completion() == (None, "state")

    def test_equality(self) -> None:
        assert Ok(None) == Ok(None)
        assert Ok(1) != Ok(2)
        assert Ok(1) != 1

    def test_repr(self) -> None:
        assert repr(Ok("x")) == "Ok('x')"


class TestErr:
    def test_flags(self) -> None:
        err = Err(RuntimeError("x"))
        assert err.is_err()
        assert not err.is_ok()

    def test_unwrap_raises_carried_error(self) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            Err(RuntimeError("boom")).unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        assert Err(RuntimeError("x")).unwrap_or("fallback") == "fallback"

    def test_map_is_noop(self) -> None:
        err = Err(RuntimeError("x"))
        assert err.map(lambda v: v) is err
        assert err.flat_map(lambda v: Ok(v)) is err

    def test_as_completion(self) -> None:
        exc = RuntimeError("x")
        assert Err(exc).as_completion() == (exc, None)

    def test_equality_is_by_identity_of_error(self) -> None:
        exc = RuntimeError("x")
        assert Err(exc) == Err(exc)
        assert Err(exc) != Err(RuntimeError("x"))
