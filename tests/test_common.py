"""Tests for common utilities."""

import pytest
from libs.common.config import BaseConfig, ContactsConfig, get_config
from libs.common.logging import configure_logging
from libs.common.metrics import MetricsCollector


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment variables out of config tests."""
    for name in ("CRM_ENV", "CRM_LOG_LEVEL", "CRM_LOG_FORMAT", "CRM_HOST",
                 "CRM_PORT", "PORT", "CRM_CORS_ORIGINS", "CRM_SEED_FILE"):
        monkeypatch.delenv(name, raising=False)


def test_config_loading():
    """Test configuration loading."""
    config = BaseConfig()
    assert config.crm_env == "local"
    assert config.crm_log_level == "INFO"
    assert config.crm_log_format == "json"


def test_contacts_config_defaults():
    """Test contacts service configuration defaults."""
    config = ContactsConfig()
    assert config.crm_host == "0.0.0.0"
    assert config.crm_port == 3000
    assert config.crm_seed_file is None
    assert config.cors_origin_list() == ["*"]


def test_contacts_config_from_env(monkeypatch):
    """Test environment overrides."""
    monkeypatch.setenv("CRM_PORT", "8080")
    monkeypatch.setenv("CRM_CORS_ORIGINS", "http://a.example, http://b.example,")
    monkeypatch.setenv("CRM_SEED_FILE", "/tmp/contacts.json")

    config = ContactsConfig()
    assert config.crm_port == 8080
    assert config.cors_origin_list() == ["http://a.example", "http://b.example"]
    assert config.crm_seed_file == "/tmp/contacts.json"


def test_contacts_config_bare_port(monkeypatch):
    """Test that a bare PORT variable is honoured."""
    monkeypatch.setenv("PORT", "5050")
    assert ContactsConfig().crm_port == 5050


def test_get_config():
    """Test config selection by service name."""
    assert isinstance(get_config("contacts"), ContactsConfig)
    assert type(get_config("unknown")) is BaseConfig


def test_logging_configuration():
    """Test logging configuration."""
    # This should not raise an exception
    configure_logging("test-service", "INFO", "json")
    configure_logging("test-service", "debug", "console")


def test_logging_rejects_unknown_level():
    """Test that an unknown log level is reported."""
    with pytest.raises(ValueError):
        configure_logging("test-service", "LOUD", "json")


def test_metrics_collector():
    """Test metrics collector."""
    collector = MetricsCollector("test-service")
    assert collector.service_name == "test-service"

    collector.record_http_request("GET", "/test", 200, 0.1)
    collector.record_contact_lookup("found")
    collector.record_contact_lookup("not_found")

    metrics = collector.get_metrics()
    assert isinstance(metrics, str)
    assert "http_requests_total" in metrics
    assert 'crm_contact_lookups_total{outcome="found"} 1.0' in metrics
    assert 'crm_contact_lookups_total{outcome="not_found"} 1.0' in metrics
