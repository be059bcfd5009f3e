"""
Stat Options
============
The option set owned by a single Stat.

Construction is lenient: numeric options that are missing or not a valid
number fall back to their defaults instead of failing validation.
Assignment after construction is NOT validated (Stat.set is an unchecked
write), so the model keeps pydantic's default `validate_assignment=False`.
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bounded_stat.utils.constraints import coerce_increment, coerce_number

logger = logging.getLogger(__name__)

# Only these may be targeted explicitly by Stat.mod(); the proxy value is the
# implicit default target and is never named.
MOD_PROPERTIES: Tuple[str, ...] = ("base_value",)

NUMERIC_DEFAULTS: Dict[str, float] = {
    "base_value": 0.0,
    "minimum_value": float("-inf"),
    "minimum_boundary": -10.0,
    "maximum_value": float("inf"),
    "maximum_boundary": 10.0,
}

FLAG_OPTIONS = ("round_to_increment", "cancel_on_min_max_breach")


class StatOptions(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="constants")

    id: Any = Field(None, description="Opaque identifier.")
    name: Any = Field(None, description="Opaque display name.")

    base_value: float = Field(0.0, description="Raw value, independent of temporary modifiers.")
    proxy_value: float = Field(0.0, description="Current effective value read by Stat.value().")
    proxy_value_previous: float = Field(
        0.0, description="Proxy value before the last committed mod. Used for threshold crossing."
    )

    # Enforced by mod()
    minimum_value: float = float("-inf")
    maximum_value: float = float("inf")

    # Presentation only (gauges, bars). Never enforced.
    minimum_boundary: float = -10.0
    maximum_boundary: float = 10.0

    increment_by: Optional[float] = Field(
        None, description="Unit every modded value must be a multiple of. None disables it."
    )
    round_to_increment: bool = Field(
        False, description="Round a non-conforming value to the nearest increment instead of failing."
    )
    cancel_on_min_max_breach: bool = Field(
        False, description="Abort a mod that breaches min/max instead of clamping it."
    )

    @model_validator(mode="before")
    @classmethod
    def _apply_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        raw = dict(data)
        cleaned: Dict[str, Any] = {"id": raw.get("id"), "name": raw.get("name")}

        for key, default in NUMERIC_DEFAULTS.items():
            cleaned[key] = coerce_number(raw.get(key), default)

        # proxy starts from base unless explicitly overridden
        proxy = coerce_number(raw.get("proxy_value"), cleaned["base_value"])
        cleaned["proxy_value"] = proxy
        cleaned["proxy_value_previous"] = coerce_number(raw.get("proxy_value_previous"), proxy)

        cleaned["increment_by"] = coerce_increment(raw.get("increment_by"))

        for key in FLAG_OPTIONS:
            cleaned[key] = bool(raw.get(key))

        return cleaned

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "StatOptions":
        return cls.model_validate(data or {})

    @classmethod
    def from_json(cls, json_str: str) -> "StatOptions":
        """Build options from a JSON object. Malformed JSON yields all defaults."""
        try:
            data = json.loads(json_str)
        except (TypeError, ValueError) as e:
            logger.warning(f"Could not parse stat options JSON, using defaults: {e}")
            data = {}
        if not isinstance(data, dict):
            logger.warning("Stat options JSON is not an object, using defaults.")
            data = {}
        return cls.from_dict(data)
