import pytest

from pterolink.config import COLLECTION_NAMES, ClientConfig
from pterolink.exceptions import ConfigurationError


class TestClientConfig:
    def test_default_values(self):
        """Test default configuration values."""
        config = ClientConfig(panel_url="https://panel.example.com", api_key="ptla_x")

        assert config.timeout == 30.0
        assert config.user_agent == "pterolink"
        assert config.verify_ssl is True
        assert config.rate_per_second == 5.0
        assert config.collection_rates == {}

    def test_trailing_slash_stripped(self):
        config = ClientConfig(panel_url="https://panel.example.com///", api_key="k")

        assert config.panel_url == "https://panel.example.com"
        assert config.api_url("application") == "https://panel.example.com/api/application"
        assert config.api_url("client") == "https://panel.example.com/api/client"

    @pytest.mark.parametrize(
        "url", ["", "panel.example.com", "ftp://panel.example.com", "https://"]
    )
    def test_invalid_url(self, url):
        with pytest.raises(ConfigurationError, match="panel_url"):
            ClientConfig(panel_url=url, api_key="k")

    @pytest.mark.parametrize("key", ["", "   "])
    def test_empty_key(self, key):
        with pytest.raises(ConfigurationError, match="api_key"):
            ClientConfig(panel_url="https://p.example.com", api_key=key)

    def test_non_positive_timeout(self):
        with pytest.raises(ConfigurationError, match="timeout"):
            ClientConfig(panel_url="https://p.example.com", api_key="k", timeout=0)

    def test_non_positive_rate(self):
        with pytest.raises(ConfigurationError, match="rate_per_second"):
            ClientConfig(panel_url="https://p.example.com", api_key="k", rate_per_second=0)


class TestCollectionRates:
    def test_rate_for_uses_override(self):
        config = ClientConfig(
            panel_url="https://p.example.com",
            api_key="k",
            rate_per_second=4.0,
            collection_rates={"servers": 1.0},
        )

        assert config.rate_for("servers") == 1.0
        assert config.rate_for("users") == 4.0

    def test_known_collections(self):
        assert COLLECTION_NAMES == {"users", "servers", "nodes", "nests", "eggs"}

    def test_unknown_collection(self):
        with pytest.raises(ConfigurationError, match="Unknown collection"):
            ClientConfig(
                panel_url="https://p.example.com", api_key="k", collection_rates={"pets": 1.0}
            )

    def test_non_positive_override(self):
        with pytest.raises(ConfigurationError):
            ClientConfig(
                panel_url="https://p.example.com", api_key="k", collection_rates={"eggs": 0}
            )
