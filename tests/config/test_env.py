from __future__ import annotations

import pytest

from locationbook.config import ConfigurationError, MissingConfigurationError, require_env_vars
from locationbook.config.env import float_env_var, optional_env_var


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)
    monkeypatch.setenv("PRESENT_VAR", "x")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR", "PRESENT_VAR"])

    assert "MISSING_VAR" in str(exc.value)
    assert "PRESENT_VAR" not in str(exc.value)


def test_require_env_vars_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_vars(["EXAMPLE_VAR"])


def test_optional_env_var_falls_back_on_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", " ")

    assert optional_env_var("EXAMPLE_VAR", "fallback") == "fallback"


def test_float_env_var_parses_and_validates(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_NUMBER", "2.5")
    assert float_env_var("EXAMPLE_NUMBER", 1.0) == 2.5

    monkeypatch.setenv("EXAMPLE_NUMBER", "soon")
    with pytest.raises(ConfigurationError, match="must be a number"):
        float_env_var("EXAMPLE_NUMBER", 1.0)

    monkeypatch.setenv("EXAMPLE_NUMBER", "-1")
    with pytest.raises(ConfigurationError, match="must be positive"):
        float_env_var("EXAMPLE_NUMBER", 1.0)
