"""Centralized logging configuration for popo.

Library use ("sdk" mode) attaches a plain stream handler to the ``popo`` logger.
The command line ("cli" mode) routes records through rich on the shared console.
"""

import logging

_LOGGING_CONFIGURED = False

_TOOLKIT_LOGGER = "popo"


def setup_toolkit_logging(mode: str = "sdk") -> None:
    """Configure popo logging once per process.

    Args:
        mode: "sdk" for library use or "cli" for the command line

    Raises:
        ValueError: If the mode is unknown
    """
    global _LOGGING_CONFIGURED

    if mode not in ("sdk", "cli"):
        raise ValueError(f"Invalid logging mode: {mode}")

    if _LOGGING_CONFIGURED:
        return

    if mode == "cli":
        _setup_cli_logging()
    else:
        _setup_sdk_logging()

    _LOGGING_CONFIGURED = True


def _setup_cli_logging() -> None:
    from rich.logging import RichHandler

    from ..cli.common import console

    handler = RichHandler(show_time=False, show_path=False, show_level=False, console=console)
    logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=[handler], force=True)


def _setup_sdk_logging() -> None:
    toolkit_logger = logging.getLogger(_TOOLKIT_LOGGER)
    if toolkit_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
    toolkit_logger.addHandler(handler)
    toolkit_logger.setLevel(logging.INFO)


def is_logging_configured() -> bool:
    """Check if popo logging has been configured."""
    return _LOGGING_CONFIGURED


def reset_logging_config() -> None:
    """Reset the configured flag so logging can be set up again."""
    global _LOGGING_CONFIGURED
    _LOGGING_CONFIGURED = False
