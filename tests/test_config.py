"""
Tests for configuration selection and validation
"""
import pytest
from config import (
    Config, ConfigurationError, DevelopmentConfig, ProductionConfig,
    TestingConfig, get_config
)


class TestGetConfig:

    @pytest.mark.parametrize('name, expected', [
        ('development', DevelopmentConfig),
        ('testing', TestingConfig),
        ('production', ProductionConfig),
        ('no-such-env', DevelopmentConfig),
    ])
    def test_selects_by_name(self, name, expected):
        assert get_config(name) is expected

    def test_falls_back_to_flask_env(self, monkeypatch):
        monkeypatch.setenv('FLASK_ENV', 'testing')
        assert get_config() is TestingConfig


class TestValidation:

    def test_production_requires_secret_and_database(self, monkeypatch):
        monkeypatch.delenv('SKIP_ENV_VALIDATION', raising=False)
        monkeypatch.delenv('SECRET_KEY', raising=False)
        monkeypatch.setenv('DATABASE_URL', 'postgresql://localhost/media_ranker')

        with pytest.raises(ConfigurationError, match='SECRET_KEY'):
            ProductionConfig.validate_required_config()

    def test_production_passes_with_settings_present(self, monkeypatch):
        monkeypatch.delenv('SKIP_ENV_VALIDATION', raising=False)
        monkeypatch.setenv('SECRET_KEY', 'x' * 32)
        monkeypatch.setenv('DATABASE_URL', 'postgresql://localhost/media_ranker')

        ProductionConfig.validate_required_config()

    def test_validation_can_be_skipped(self, monkeypatch):
        monkeypatch.setenv('SKIP_ENV_VALIDATION', '1')
        monkeypatch.delenv('SECRET_KEY', raising=False)

        ProductionConfig.validate_required_config()

    def test_base_config_requires_nothing(self, monkeypatch):
        monkeypatch.delenv('SKIP_ENV_VALIDATION', raising=False)
        Config.validate_required_config()


class TestTestingConfig:

    def test_uses_in_memory_sqlite_and_cachelib_sessions(self, app):
        assert app.config['TESTING'] is True
        assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
        assert app.config['SESSION_TYPE'] == 'cachelib'

    def test_top_works_limit_defaults_to_ten(self, app):
        assert app.config['TOP_WORKS_LIMIT'] == 10
