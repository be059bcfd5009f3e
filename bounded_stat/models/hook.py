from typing import Any, Callable

from pydantic import BaseModel, Field


class Comparison(str):
    LESS_THAN = "<"
    GREATER_THAN = ">"
    EQUAL = "="


class Hook(BaseModel):
    """
    A threshold-triggered callback attached to a Stat.

    The comparison is stored as given. Anything other than "<", ">" or "="
    is accepted but never fires.
    """

    name: str = Field(..., description="Unique key within the owning Stat.")
    threshold_value: float = Field(..., description="Value the new proxy value is compared against.")
    comparison: str = Field(..., description="One of '<', '>' or '='.")
    cross_to_activate: bool = Field(
        False,
        description="Fire only when the threshold is crossed, not on every mod beyond it. Ignored for '='.",
    )
    callback: Callable[..., Any] = Field(..., description="Called as callback(stat) when the hook fires.")
    enabled: bool = True

    def should_fire(self, new_value: float, previous_value: float) -> bool:
        if not self.enabled:
            return False

        if self.comparison == Comparison.EQUAL:
            return new_value == self.threshold_value

        if self.comparison == Comparison.LESS_THAN and new_value < self.threshold_value:
            # previous at/above the threshold means we just crossed downward
            return not self.cross_to_activate or previous_value >= self.threshold_value

        if self.comparison == Comparison.GREATER_THAN and new_value > self.threshold_value:
            return not self.cross_to_activate or previous_value <= self.threshold_value

        return False
