"""Denseset filesystem paths."""


# Imports.
from pathlib import Path


LOCAL_SETTINGS = Path('denseset.yml')
USER_SETTINGS = Path('~/.denseset/config.yml').expanduser()

SETTINGS_SEARCH_PATH = (LOCAL_SETTINGS, USER_SETTINGS)
