from __future__ import annotations

import pytest

from pgident import config
from pgident.config import Settings
from pgident.exceptions import ConfigurationError


def test_settings_from_env_uses_defaults(clean_env):
    settings = Settings.from_env()
    assert settings.split_dots is False
    assert settings.default_schema is None


@pytest.mark.parametrize(
    ("raw", "expected"), [("1", True), ("Yes", True), ("off", False)]
)
def test_settings_from_env_parses_split_dots(clean_env, raw, expected):
    clean_env.setenv("PGIDENT_SPLIT_DOTS", raw)
    assert Settings.from_env().split_dots is expected


def test_settings_from_env_validates_split_dots(clean_env):
    clean_env.setenv("PGIDENT_SPLIT_DOTS", "maybe")
    with pytest.raises(ConfigurationError):
        Settings.from_env()


def test_settings_from_env_reads_default_schema(clean_env):
    clean_env.setenv("PGIDENT_DEFAULT_SCHEMA", "Reporting")
    assert Settings.from_env().default_schema == "Reporting"


def test_get_settings_is_cached(clean_env):
    first = config.get_settings()
    clean_env.setenv("PGIDENT_SPLIT_DOTS", "true")
    assert config.get_settings() is first
    assert config.get_settings(force_reload=True).split_dots is True


def test_configuration_error_is_not_an_identifier_error():
    from pgident.exceptions import IdentError, PgIdentError

    assert issubclass(ConfigurationError, PgIdentError)
    assert not issubclass(ConfigurationError, IdentError)
