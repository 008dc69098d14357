"""Loggers for the rainbowtags package.

Every module logs through ``get_logger(__name__)`` so that one switch on the
``rainbowtags`` logger controls scan summaries and session lifecycle
messages together. The library installs no handlers.

Example:
    >>> import logging
    >>> logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "rainbowtags"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the rainbowtags hierarchy.

    Module names already under the package (``rainbowtags.session``) are used
    as is; any other name is nested below the package logger.

    Example:
        >>> get_logger("editor").name
        'rainbowtags.editor'
        >>> get_logger("rainbowtags.scanner").name
        'rainbowtags.scanner'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
