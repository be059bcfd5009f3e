import logging
from typing import Union


class EmojiFormatter(logging.Formatter):
    """
    A custom log formatter that adds an emoji to the beginning of the log message
    based on the log level.
    """

    LEVEL_EMOJIS = {
        logging.DEBUG: "🐛",
        logging.INFO: "✅",
        logging.WARNING: "⚠️",
        logging.ERROR: "❌",
    }

    def format(self, record):
        s = super().format(record)
        emoji = self.LEVEL_EMOJIS.get(record.levelno, "")
        return f"{emoji} {s}"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Union[int, str] = logging.DEBUG) -> logging.Logger:
    """
    Configures the root logger with the EmojiFormatter.
    Call once at the entry point; stat modules only ever use
    logging.getLogger(__name__) and never configure handlers themselves.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level))

    console_handler = logging.StreamHandler()
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_handler.setFormatter(EmojiFormatter(log_format))

    # Remove any existing handlers to avoid duplicate logs
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)
    return root_logger
