import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(fiso_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified fiso logging.

    Args:
        fiso_home: Path to fiso home directory. If None, derived from environment.
        level: Logging level name for the ``fiso`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if fiso_home is None:
        from ..api.config.get_home_dir import get_home_dir

        fiso_home = get_home_dir()

    # Ensure directory exists
    fiso_home.mkdir(parents=True, exist_ok=True)
    log_file = fiso_home / "fiso.log"

    root_logger = logging.getLogger("fiso")
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach handlers installed by configure_logging so it can run again."""
    global _CONFIGURED
    root_logger = logging.getLogger("fiso")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
