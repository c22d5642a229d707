from __future__ import annotations

"""Central logging configuration for skin_layout.

Import and call :func:`setup_logging` at application start-up. The library
itself only logs through module loggers and never configures handlers on
import.
"""

import logging
import logging.config
import os
from typing import Any, Dict, List

from skin_layout.config import ConfigManager

__all__ = ["setup_logging"]

logger = logging.getLogger(__name__)

_DEBUG_MODULES_ENV = "SKIN_LAYOUT_DEBUG_MODULES"


def setup_logging() -> None:
    """Configure logging from the packaged ``logging.yml`` and user overrides."""
    log_dir = os.environ.get("SKIN_LAYOUT_LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "skin_layout.log")

    logging_config: Dict[str, Any] = dict(ConfigManager().get_logging_config())

    if logging_config.get("version"):
        handlers = dict(logging_config.get("handlers", {}))
        if "file" in handlers:
            handlers["file"] = {**handlers["file"], "filename": log_file}
            logging_config["handlers"] = handlers
        try:
            logging.config.dictConfig(logging_config)
        except (ValueError, TypeError, AttributeError, ImportError) as exc:
            _setup_minimal_logging()
            logger.error("Invalid logging config, using minimal fallback: %s", exc)
        else:
            logger.info("===== Logging initialised from config files =====")
    else:
        _setup_minimal_logging()
        logger.warning("===== Logging initialised with minimal fallback (no config) =====")

    _apply_debug_overrides()


def _setup_minimal_logging() -> None:
    """Set up console-only logging when no usable config is available."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'INFO',
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
    }

    logging.config.dictConfig(minimal_config)


def _debug_targets() -> List[str]:
    raw = os.environ.get(_DEBUG_MODULES_ENV, "").strip()
    return [name.strip() for name in raw.split(",") if name.strip()]


def _apply_debug_overrides() -> None:
    """Switch the loggers listed in ``SKIN_LAYOUT_DEBUG_MODULES`` to DEBUG.

    ``SKIN_LAYOUT_DEBUG_MODULES=skin_layout.core.factory,skin_layout.core.registry``
    """
    for name in _debug_targets():
        target = logging.getLogger(name)
        target.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(h.level <= logging.DEBUG for h in target.handlers)
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            target.addHandler(h)
        target.info("Debug override active for logger '%s'", name)
