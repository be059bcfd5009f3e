"""
Core Package
============
The Stat entity and its mod pipeline.
"""

from bounded_stat.core.stat import Stat, PROXY_PROPERTY

__all__ = [
    "Stat",
    "PROXY_PROPERTY",
]
