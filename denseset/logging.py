"""Denseset logging."""


# Imports
import logging
from typing import Any

import coloredlogs

from denseset import settings


LOGGING_FMT = '%(asctime)s %(name)s %(levelname)8s %(message)s'
VERBOSE = 15
SPAM = 5
logging.addLevelName(VERBOSE, 'VERBOSE')
logging.addLevelName(SPAM, 'SPAM')


class DenseSetLoggingAdapter(logging.LoggerAdapter):
    """Logging adapter with the extra ``VERBOSE`` and ``SPAM`` levels."""

    def verbose(self, msg: str, *args, **kwargs):
        """Log verbose."""
        self.log(VERBOSE, msg, *args, **kwargs)

    def spam(self, msg: str, *args, **kwargs):
        """Log spam."""
        self.log(SPAM, msg, *args, **kwargs)


def install_stream_handler(**kwargs):
    """Install a coloredlogs stream handler.

    This acts like ``coloredlogs.install``, except that it preserves the
    logging level and format for the denseset logger by default.

    Additional kwargs are passed through to ``coloredlogs.install``.
    """
    _kwargs = {
        'logger': logger.logger,
        'level': logger.logger.level,
        'fmt': LOGGING_FMT,
    }
    _kwargs.update(kwargs)
    coloredlogs.install(**_kwargs)


def set_level(level: Any):
    """Set the logging level for the denseset logger.

    Parameters
    ----------
    level : Any
        Logging level. Must be a valid value for ``logging.setLevel``.
    """
    logger.setLevel(level)

    # Keep an installed handler in step with the logger.
    handler, _ = coloredlogs.find_handler(
        logger.logger,
        coloredlogs.match_stream_handler,
    )
    if handler:
        handler.setLevel(level)


# Configure logging
logger = DenseSetLoggingAdapter(logging.getLogger('denseset'), {})
logger.setLevel(settings.LOG_LEVEL)
if settings.INSTALL_LOG_HANDLER:
    install_stream_handler()
