import logging

import pytest

from bounded_stat.utils.logger_config import EmojiFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_formatter_prefixes_emoji():
    formatter = EmojiFormatter("%(levelname)s - %(message)s")
    record = logging.LogRecord("stat", logging.WARNING, __file__, 1, "breach", None, None)
    assert formatter.format(record) == "⚠️ WARNING - breach"

def test_formatter_unknown_level_has_no_emoji():
    formatter = EmojiFormatter("%(message)s")
    record = logging.LogRecord("stat", logging.CRITICAL, __file__, 1, "boom", None, None)
    assert formatter.format(record) == " boom"

def test_setup_logging_installs_single_handler(restore_root_logger):
    setup_logging("warning")
    setup_logging("warning")
    root = restore_root_logger
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, EmojiFormatter)

def test_setup_logging_unknown_level_defaults_to_info(restore_root_logger):
    setup_logging("chatty")
    assert restore_root_logger.level == logging.INFO
