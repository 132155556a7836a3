"""Unit tests for logging and Logfire configuration."""

import logging

import logfire
import pytest

from circle.config import ObservabilitySettings, Settings
from circle.util.error import ConfigurationError
from circle.util.logging import setup_logging
from circle.util.observability import configure_logfire


@pytest.fixture
def logfire_calls(monkeypatch):
    """Record logfire.configure calls instead of configuring the SDK."""
    calls: list[dict] = []
    monkeypatch.setattr(logfire, "configure", lambda **kwargs: calls.append(kwargs))
    return calls


class TestConfigureLogfire:
    """Tests for configure_logfire."""

    def test_console_only_without_token(self, logfire_calls):
        """Without a token nothing should be sent to the cloud."""
        configure_logfire(Settings(_env_file=None))

        assert logfire_calls[0]["send_to_logfire"] is False
        assert "token" not in logfire_calls[0]
        assert logfire_calls[0]["service_name"] == "circle"

    def test_token_enables_cloud(self, logfire_calls):
        """A token should turn on cloud sending by default."""
        settings = Settings(
            _env_file=None,
            observability=ObservabilitySettings(logfire_token="tok"),
        )

        configure_logfire(settings)

        assert logfire_calls[0]["send_to_logfire"] is True
        assert logfire_calls[0]["token"] == "tok"

    def test_explicit_opt_out_with_token(self, logfire_calls):
        """An explicit False should win over the token."""
        settings = Settings(
            _env_file=None,
            observability=ObservabilitySettings(
                logfire_token="tok", send_to_logfire=False
            ),
        )

        configure_logfire(settings)

        assert logfire_calls[0]["send_to_logfire"] is False

    def test_cloud_without_token_raises(self, logfire_calls):
        """Forcing cloud sending without a token is a configuration error."""
        settings = Settings(
            _env_file=None,
            observability=ObservabilitySettings(send_to_logfire=True),
        )

        with pytest.raises(ConfigurationError):
            configure_logfire(settings)
        assert logfire_calls == []


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def _no_basic_config(self, monkeypatch):
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
        level = logging.getLogger("circle").level
        yield
        logging.getLogger("circle").setLevel(level)

    @pytest.mark.parametrize(
        ("environment", "debug", "expected"),
        [
            ("development", False, logging.INFO),
            ("production", False, logging.WARNING),
            ("production", True, logging.DEBUG),
        ],
    )
    def test_levels(self, environment, debug, expected):
        """Debug should win, production should be quiet."""
        settings = Settings(_env_file=None, environment=environment, debug=debug)

        level = setup_logging(settings)

        assert level == expected
        assert logging.getLogger("circle").level == expected
