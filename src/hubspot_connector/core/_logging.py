# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Best-effort logging helpers shared by the gateway and the operation namespaces."""

from __future__ import annotations

import logging
from typing import Any, Optional

LOGGER_NAME = "hubspot_connector"


def resolve_logger(logger: Optional[Any] = None) -> Any:
    """Return ``logger`` or the package logger when none is supplied."""
    return logger if logger is not None else logging.getLogger(LOGGER_NAME)


def safe_log(logger: Any, level: int, msg: str, *args: Any) -> None:
    """
    Log through ``logger`` without ever raising.

    ``logger`` may be a :class:`logging.Logger` or any object exposing ``log`` or the
    level-named methods (``debug``, ``info``, ``warning``, ``error``).
    """
    try:
        log = getattr(logger, "log", None)
        if callable(log):
            log(level, msg, *args)
            return
        method = getattr(logger, logging.getLevelName(level).lower(), None)
        if callable(method):
            method(msg, *args)
    except Exception:
        pass  # Logging must not break requests
