"""Tests для Settings (env-driven configuration)."""

import pytest
from pydantic import ValidationError

from ordering.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "SEED_ORDER_COUNT",
            "ENFORCE_TRANSITIONS",
            "EVENT_DISPATCH_ENABLED",
            "ENVIRONMENT",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.seed_order_count == 20
        assert settings.enforce_transitions is False
        assert settings.event_dispatch_enabled is True
        assert settings.environment == "development"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SEED_ORDER_COUNT", "5")
        monkeypatch.setenv("ENFORCE_TRANSITIONS", "true")

        settings = Settings(_env_file=None)

        assert settings.seed_order_count == 5
        assert settings.enforce_transitions is True

    def test_seed_order_count_upper_bound(self, monkeypatch):
        monkeypatch.setenv("SEED_ORDER_COUNT", "100")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
