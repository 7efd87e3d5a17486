import pytest
from pydantic import ValidationError

from utilbelt.core.config import Settings


def test_defaults(monkeypatch):
    for name in Settings.model_fields:
        monkeypatch.delenv(f"UTILBELT_{name}", raising=False)
    loaded = Settings.load()
    assert loaded.LOG_LEVEL == "WARNING"
    assert loaded.CURRENCY_DELIMITER == ","
    assert loaded.CURRENCY_PRECISION == 2
    assert loaded.CURRENCY_STRIP_ZERO_DECIMAL is True
    assert loaded.MASK_CHAR == "*"
    assert loaded.LIGHT_LUMINANCE_THRESHOLD == pytest.approx(0.179)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("UTILBELT_CURRENCY_DELIMITER", ".")
    monkeypatch.setenv("UTILBELT_CURRENCY_PRECISION", "3")
    monkeypatch.setenv("UTILBELT_CURRENCY_STRIP_ZERO_DECIMAL", "false")
    loaded = Settings.load()
    assert loaded.CURRENCY_DELIMITER == "."
    assert loaded.CURRENCY_PRECISION == 3
    assert loaded.CURRENCY_STRIP_ZERO_DECIMAL is False


def test_invalid_environment_value(monkeypatch):
    monkeypatch.setenv("UTILBELT_CURRENCY_PRECISION", "-1")
    with pytest.raises(ValidationError):
        Settings.load()


def test_settings_are_frozen():
    with pytest.raises(ValidationError):
        Settings().MASK_CHAR = "#"
