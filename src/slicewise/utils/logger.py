"""Logger lookup for the slicewise namespace.

Every module logs through a child of the "slicewise" logger, so one call
such as logging.getLogger("slicewise").setLevel(logging.DEBUG) turns on
rule continuation and scanner match traces everywhere. The library installs
only a NullHandler; where records go is the application's choice.

Example:
    >>> logger = get_logger(__name__)  # in slicewise/comments/scanner.py
    >>> logger.name
    'slicewise.comments.scanner'
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "slicewise"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name, placed under the slicewise namespace.

    Module names from inside the package are used as-is; any other name
    (a plugin rule, a test helper) is nested below "slicewise.".
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
