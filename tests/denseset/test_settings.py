"""Tests for denseset settings."""


# Imports.
from pathlib import Path

from denseset.settings import DEFAULT_SETTINGS, load_settings


class TestLoadSettings:
    """Tests for ``load_settings``."""

    def test_defaults_without_file(self, tmp_path: Path):
        """Verify defaults are used if no settings file exists."""
        assert load_settings([tmp_path / 'missing.yml']) == DEFAULT_SETTINGS

    def test_defaults_not_modified(self, tmp_path: Path):
        """Verify loading settings returns a copy of the defaults."""
        settings = load_settings([tmp_path / 'missing.yml'])
        settings['log_level'] = 'DEBUG'
        assert DEFAULT_SETTINGS['log_level'] == 'WARNING'

    def test_file_overrides_defaults(self, tmp_path: Path):
        """Verify values from the settings file take precedence."""
        path = tmp_path / 'denseset.yml'
        path.write_text('log_level: DEBUG\n')

        settings = load_settings([path])

        assert settings['log_level'] == 'DEBUG'
        assert settings['install_log_handler'] is False

    def test_empty_file(self, tmp_path: Path):
        """Verify an empty settings file yields the defaults."""
        path = tmp_path / 'denseset.yml'
        path.write_text('')
        assert load_settings([path]) == DEFAULT_SETTINGS

    def test_first_file_wins(self, tmp_path: Path):
        """Verify only the first existing settings file is read."""
        local = tmp_path / 'local.yml'
        user = tmp_path / 'user.yml'
        local.write_text('log_level: INFO\n')
        user.write_text('log_level: DEBUG\ninstall_log_handler: true\n')

        settings = load_settings([tmp_path / 'missing.yml', local, user])

        assert settings['log_level'] == 'INFO'
        assert settings['install_log_handler'] is False
