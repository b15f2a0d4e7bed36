import pytest

from kalshi_rest.config import (
    ConfigurationError,
    KalshiCredentials,
    TradingEnvironment,
    get_kalshi_credentials,
    get_trading_environment,
)
from kalshi_rest.config.shared import DEMO_BASE_URL, LIVE_BASE_URL


class TestTradingEnvironment:
    def test_base_urls(self):
        assert TradingEnvironment.DEMO.base_url == DEMO_BASE_URL == "https://demo-api.kalshi.co/trade-api/v2"
        assert TradingEnvironment.LIVE.base_url == LIVE_BASE_URL == "https://trading-api.kalshi.com/trade-api/v2"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("demo", TradingEnvironment.DEMO),
            ("Paper", TradingEnvironment.DEMO),
            ("live", TradingEnvironment.LIVE),
            (" PROD ", TradingEnvironment.LIVE),
            ("production", TradingEnvironment.LIVE),
        ],
    )
    def test_parse_aliases(self, raw, expected):
        assert TradingEnvironment.parse(raw) is expected

    def test_parse_rejects_unknown(self):
        with pytest.raises(ConfigurationError, match="KALSHI_ENVIRONMENT"):
            TradingEnvironment.parse("staging")

    def test_defaults_to_demo(self):
        assert get_trading_environment() is TradingEnvironment.DEMO

    def test_reads_environment_variable(self, monkeypatch):
        monkeypatch.setenv("KALSHI_ENVIRONMENT", "live")
        assert get_trading_environment() is TradingEnvironment.LIVE


class TestCredentials:
    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("LIVE_USER_NAME", "trader@example.com")
        monkeypatch.setenv("LIVE_PASSWORD", "hunter2")

        credentials = get_kalshi_credentials(TradingEnvironment.LIVE)

        assert credentials == KalshiCredentials(username="trader@example.com", password="hunter2")

    def test_uses_configured_environment_when_not_given(self, monkeypatch):
        monkeypatch.setenv("DEMO_USER_NAME", "demo@example.com")
        monkeypatch.setenv("DEMO_PASSWORD", "pw")
        assert get_kalshi_credentials().username == "demo@example.com"

    def test_missing_password_raises(self, monkeypatch):
        monkeypatch.setenv("DEMO_USER_NAME", "demo@example.com")
        with pytest.raises(ConfigurationError, match="DEMO_PASSWORD"):
            get_kalshi_credentials(TradingEnvironment.DEMO)

    def test_repr_hides_password(self):
        credentials = KalshiCredentials(username="a@b.c", password="hunter2")
        assert "hunter2" not in repr(credentials)
