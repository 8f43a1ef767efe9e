"""Runtime settings and logging setup.

Settings come from environment variables, optionally loaded from a
``.env`` file in the working directory:

- ``TRANSACTION_CLASSIFIER_LOG_LEVEL``: logging level name (default ``WARNING``)
- ``TRANSACTION_CLASSIFIER_CV_FOLDS``: cross-validation folds (default ``5``)
- ``TRANSACTION_CLASSIFIER_CV_SEED``: cross-validation seed (default ``42``)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.logging import RichHandler

ENV_PREFIX = "TRANSACTION_CLASSIFIER_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Configuration for the classifier tooling."""

    log_level: str = "WARNING"
    cv_folds: int = 5
    cv_seed: int = 42

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``. When omitted,
                a ``.env`` file is loaded first (existing variables win).

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = dict(os.environ)

        defaults = cls()
        log_level = environ.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).strip().upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid {ENV_PREFIX}LOG_LEVEL: {log_level!r}. "
                f"Expected one of: {', '.join(_LOG_LEVELS)}"
            )

        return cls(
            log_level=log_level,
            cv_folds=_int_setting(environ, "CV_FOLDS", defaults.cv_folds),
            cv_seed=_int_setting(environ, "CV_SEED", defaults.cv_seed),
        )


def _int_setting(environ: dict[str, str], name: str, default: int) -> int:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid {ENV_PREFIX}{name}: {raw!r} is not an integer") from None


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a rich console handler to the package logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Logging level name.

    Returns:
        The package logger.
    """
    package_logger = logging.getLogger("transaction_classifier")
    package_logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        )
    return package_logger
