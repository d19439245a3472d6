"""Logging configuration for Pocket Ledger.

Sets up logging to both file (with date-based naming) and console. The CLI
renders its reports through this logger, so INFO lines reach the console as
plain text while warnings and errors keep their level prefix.
"""

import logging
from datetime import date
from config import Config


class ConsoleFormatter(logging.Formatter):
    """Formatter that leaves report lines (INFO and below) unprefixed."""

    def __init__(self):
        super().__init__("%(levelname)s - %(message)s")
        self._plain = logging.Formatter("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno <= logging.INFO:
            return self._plain.format(record)
        return super().format(record)


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("ledger")
    logger.setLevel(config.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    # The file keeps everything with timestamps, including the rendered reports
    log_file_path = config.log_dir / f"ledger-{date.today().isoformat()}.log"
    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(ConsoleFormatter())

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The ledger logger instance.
    """
    return logging.getLogger("ledger")
