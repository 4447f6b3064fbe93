"""Centralized logging configuration for the SafeDict toolkit."""

import logging

_LOGGING_CONFIGURED = False

_LOGGER_NAME = "safedict"
_VALID_MODES = ("sdk", "cli")


def setup_safedict_logging(mode: str = "sdk") -> None:
    """Set up logging for the toolkit once per process.

    Args:
        mode: "sdk" for library use (plain stream handler) or "cli" for rich console output

    Raises:
        ValueError: If mode is not one of the supported modes
    """
    global _LOGGING_CONFIGURED

    if mode not in _VALID_MODES:
        raise ValueError(f"Invalid logging mode: {mode}")

    if _LOGGING_CONFIGURED:
        return

    if mode == "cli":
        _setup_cli_logging()
    else:
        _setup_sdk_logging()

    _LOGGING_CONFIGURED = True


def _setup_cli_logging() -> None:
    """Route toolkit logs through rich on the shared CLI console."""
    try:
        from rich.logging import RichHandler

        from ..cli.common import console

        handler = RichHandler(show_time=False, show_path=False, show_level=False, console=console)
        logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=[handler], force=True)
    except ImportError:
        _setup_basic_logging()


def _setup_basic_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s", force=True)


def _setup_sdk_logging() -> None:
    """Attach a single stream handler to the toolkit logger."""
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def is_logging_configured() -> bool:
    """Return whether toolkit logging has been set up."""
    return _LOGGING_CONFIGURED


def reset_logging_config() -> None:
    """Forget the configured state so logging can be set up again (mainly for tests)."""
    global _LOGGING_CONFIGURED
    _LOGGING_CONFIGURED = False
