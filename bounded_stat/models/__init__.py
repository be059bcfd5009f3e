from bounded_stat.models.stat_options import (
    StatOptions,
    MOD_PROPERTIES,
    NUMERIC_DEFAULTS,
)
from bounded_stat.models.hook import Comparison, Hook
from bounded_stat.models.mod_result import ModResult

__all__ = [
    "StatOptions",
    "MOD_PROPERTIES",
    "NUMERIC_DEFAULTS",
    "Comparison",
    "Hook",
    "ModResult",
]
