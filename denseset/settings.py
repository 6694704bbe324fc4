"""Denseset settings."""


# Imports.
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from denseset.paths import SETTINGS_SEARCH_PATH


DEFAULT_SETTINGS = {
    'log_level': 'WARNING',
    'install_log_handler': False,
}


def load_settings(paths: Iterable[Path] = SETTINGS_SEARCH_PATH
                  ) -> dict[str, Any]:
    """Load settings from the first settings file that exists.

    Parameters
    ----------
    paths : Iterable[Path]
        Candidate settings files, in order of preference.

    Returns
    -------
    dict[str, Any]
        Default settings updated with the values from the settings file. If
        no file exists, the defaults are returned.
    """
    settings = dict(DEFAULT_SETTINGS)
    for path in paths:
        if path.is_file():
            with path.open() as fd:
                settings |= yaml.safe_load(fd) or {}
            break
    return settings


# Set settings.
_settings = load_settings()
LOG_LEVEL = _settings['log_level']
INSTALL_LOG_HANDLER = bool(_settings['install_log_handler'])
