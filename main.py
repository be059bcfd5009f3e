import logging
import os

from dotenv import load_dotenv

from bounded_stat.core.stat import Stat
from bounded_stat.utils.logger_config import setup_logging

logger = logging.getLogger(__name__)


def run() -> Stat:
    """Small HP walkthrough: damage, a dry run, a crossing hook and a reset."""
    hp = Stat(
        {
            "id": "hp",
            "name": "HP",
            "base_value": 20,
            "minimum_value": 0,
            "maximum_value": 20,
            "minimum_boundary": 0,
            "maximum_boundary": 20,
            "increment_by": 1,
            "round_to_increment": True,
        }
    )
    hp.register_hook("bloodied", 10, "<", True, lambda stat: logger.info(f"{stat.get('name')} is bloodied"))
    hp.register_hook("down", 0, "=", False, lambda stat: logger.info(f"{stat.get('name')} is down"))

    hp.config()

    for amount in (-6, -5.4, -30):
        if hp.mod(amount, test=True):
            result = hp.mod(amount)
            logger.info(f"Took {-amount} damage -> {result.value}")
        else:
            logger.info(f"{-amount} damage would overflow, clamping anyway")
            hp.mod(amount)

    logger.info(f"Rested: {hp.reset()}")
    return hp


if __name__ == "__main__":
    load_dotenv()
    setup_logging(os.environ.get("LOG_LEVEL", "INFO"))
    run()
