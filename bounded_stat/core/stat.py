"""
Stat Entity
===========
A single bounded numeric value with increment rules and threshold hooks.

Mod Pipeline:
1.  **Candidate:** current value of the target + amount.
2.  **Bounds:** breach either cancels, fails a test run, or clamps.
3.  **Increment:** non-conforming values are rounded (then re-checked) or rejected.
4.  **Test short-circuit:** a test run stops here, nothing is mutated.
5.  **Commit:** for the proxy value, snapshot the previous value and run hooks, then write.

Usage:
    hp = Stat({"name": "HP", "base_value": 20, "minimum_value": 0, "maximum_value": 20})
    hp.register_hook("dying", 5, "<", True, on_dying)
    if hp.mod(-3, test=True):
        hp.mod(-3)
"""

import logging
import math
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from bounded_stat.models.hook import Hook
from bounded_stat.models.mod_result import ModResult
from bounded_stat.models.stat_options import MOD_PROPERTIES, StatOptions
from bounded_stat.utils.constraints import (
    check_increment,
    check_min_max,
    clamp_min_max,
    is_number,
    round_to_increment,
)

logger = logging.getLogger(__name__)

PROXY_PROPERTY = "proxy_value"


class Stat:
    """
    Holds a base value and a proxy (effective) value.

    Failures never raise: mod() returns a falsy ModResult carrying the
    reason, set() and toggle_hook() return False.
    """

    def __init__(
        self,
        opts: Optional[Union[Mapping[str, Any], StatOptions]] = None,
        **kwargs: Any,
    ):
        if isinstance(opts, StatOptions):
            if kwargs:
                # re-validate so keyword overrides get the same coercion as a mapping
                self._options = StatOptions.from_dict({**opts.model_dump(), **kwargs})
            else:
                self._options = opts.model_copy()
        else:
            raw = dict(opts or {})
            raw.update(kwargs)
            self._options = StatOptions.from_dict(raw)

        self._hooks: Dict[str, Hook] = {}

    def __repr__(self) -> str:
        return (
            f"Stat(name={self._options.name!r}, value={self._options.proxy_value}, "
            f"base={self._options.base_value})"
        )

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def get(self, property_name: str) -> Any:
        if property_name not in StatOptions.model_fields:
            return None
        return getattr(self._options, property_name)

    def set(self, property_name: str, value: Any) -> Any:
        """Unchecked write of an existing option. Returns the value, or False if unknown."""
        if property_name not in StatOptions.model_fields:
            return False
        setattr(self._options, property_name, value)
        logger.debug(f"Stat {self._options.name!r}: set {property_name} = {value!r}")
        return value

    def value(self) -> float:
        return self._options.proxy_value

    def reset(self) -> float:
        self._options.proxy_value = self._options.base_value
        logger.debug(f"Stat {self._options.name!r}: reset to {self._options.proxy_value}")
        return self._options.proxy_value

    def config(self) -> str:
        dump = self._options.to_json()
        logger.info(f"Stat config: {dump}")
        return dump

    # =========================================================================
    # HOOKS
    # =========================================================================

    def register_hook(
        self,
        name: str,
        threshold_value: float,
        comparison: str,
        cross_to_activate: bool,
        callback: Callable[["Stat"], Any],
        enabled: bool = True,
    ) -> Hook:
        """Insert or replace the hook stored under `name`."""
        hook = Hook(
            name=name,
            threshold_value=threshold_value,
            comparison=comparison,
            cross_to_activate=cross_to_activate,
            callback=callback,
            enabled=enabled,
        )
        self._hooks[name] = hook
        return hook

    def toggle_hook(self, name: str, enabled: bool) -> bool:
        hook = self._hooks.get(name)
        if hook is None:
            return False
        hook.enabled = enabled
        return True

    def hooks(self) -> Dict[str, Hook]:
        return dict(self._hooks)

    def check_hooks(self, new_value: float) -> List[str]:
        """
        Run every enabled hook whose threshold condition holds for `new_value`.
        Crossing is judged against proxy_value_previous.
        Returns the names of the hooks that fired.
        """
        previous = self._options.proxy_value_previous
        fired = []

        # list() so a callback may register or replace hooks while we iterate
        for name, hook in list(self._hooks.items()):
            if not hook.should_fire(new_value, previous):
                continue
            logger.debug(
                f"Stat {self._options.name!r}: hook '{name}' fired "
                f"({previous} -> {new_value} {hook.comparison} {hook.threshold_value})"
            )
            fired.append(name)
            hook.callback(self)

        return fired

    # =========================================================================
    # MOD
    # =========================================================================

    def mod(self, a: Any, b: Any = None, test: bool = False) -> ModResult:
        """
        Modify the proxy value or a moddable property.

            mod(amount)                          -> proxy_value += amount
            mod(amount, True)                    -> dry run against proxy_value
            mod("base_value", amount[, test])    -> explicit moddable property
        """
        if isinstance(a, str) and is_number(b) and a in MOD_PROPERTIES:
            return self.modify_property(a, b, test)

        if is_number(a):
            if b is not None:
                test = bool(b)
            return self.modify_proxy(a, test)

        return self._invalid_call()

    def modify_proxy(self, amount: float, test: bool = False) -> ModResult:
        if not is_number(amount) or math.isnan(amount):
            return self._invalid_call()
        return self._apply_mod(PROXY_PROPERTY, amount, test)

    def modify_property(self, property_name: str, amount: float, test: bool = False) -> ModResult:
        if property_name not in MOD_PROPERTIES or not is_number(amount) or math.isnan(amount):
            return self._invalid_call()
        return self._apply_mod(property_name, amount, test)

    def _invalid_call(self) -> ModResult:
        return self._fail(
            "Stat.mod() argument 0 must be a mod-able property name (string) or an amount "
            f"(float). Mod-able properties include: {', '.join(MOD_PROPERTIES)}"
        )

    def _fail(
        self,
        message: str,
        property_name: Optional[str] = None,
        test: bool = False,
        level: int = logging.WARNING,
    ) -> ModResult:
        logger.log(level, message)
        return ModResult.fail(message, property_name=property_name, test=test)

    def _apply_mod(self, property_name: str, amount: float, test: bool) -> ModResult:
        opts = self._options
        minimum, maximum = opts.minimum_value, opts.maximum_value

        candidate = getattr(opts, property_name) + amount

        # inf + -inf; clamping cannot repair a NaN
        if math.isnan(candidate):
            return self._fail(
                "The mod produced a value that is not a number. Mod failed.", property_name, test
            )

        # --- BOUNDS ---
        if not check_min_max(candidate, minimum, maximum):
            if opts.cancel_on_min_max_breach:
                return self._fail(
                    "The mod resulted in a min-max breach. Mod failed.", property_name, test
                )
            if test:
                return self._fail(
                    "Min-max breach, but cancel_on_min_max_breach is false. The mod would "
                    "clamp the result, but is technically invalid for testing purposes.",
                    property_name,
                    test,
                    level=logging.DEBUG,
                )
            candidate = clamp_min_max(candidate, minimum, maximum)

        # --- INCREMENT ---
        increment = opts.increment_by
        if increment and not check_increment(candidate, increment):
            if not opts.round_to_increment:
                return self._fail(
                    "The mod amount did not fit the increment, and round_to_increment "
                    "is turned off. Mod failed.",
                    property_name,
                    test,
                )
            rounded = round_to_increment(candidate, increment)
            # no fallback clamp here: rounding past a bound is a failure
            if not check_min_max(rounded, minimum, maximum):
                return self._fail(
                    "Increment rounding resulted in a min-max breach. Mod failed.",
                    property_name,
                    test,
                )
            candidate = rounded

        if test:
            return ModResult.ok(candidate, property_name, test=True)

        # --- COMMIT ---
        if property_name == PROXY_PROPERTY:
            opts.proxy_value_previous = opts.proxy_value
            self.check_hooks(candidate)

        setattr(opts, property_name, candidate)
        return ModResult.ok(candidate, property_name)
