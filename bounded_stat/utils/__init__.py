from bounded_stat.utils.logger_config import EmojiFormatter, setup_logging
from bounded_stat.utils.constraints import (
    is_number,
    coerce_number,
    coerce_increment,
    check_min_max,
    clamp_min_max,
    check_increment,
    round_to_increment,
)

__all__ = [
    # Logging
    "EmojiFormatter",
    "setup_logging",
    # Constraints
    "is_number",
    "coerce_number",
    "coerce_increment",
    "check_min_max",
    "clamp_min_max",
    "check_increment",
    "round_to_increment",
]
