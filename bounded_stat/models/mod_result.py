from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ModResult:
    """
    Outcome of Stat.mod().

    Truthiness follows `success`, so a mod that commits 0 is still truthy.
    On failure `value` is None and `message` says why.
    In test mode `value` is the value the mod would have committed.
    """

    success: bool
    value: Optional[float] = None
    property_name: Optional[str] = None
    test: bool = False
    message: str = ""

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, value: float, property_name: str, test: bool = False) -> "ModResult":
        return cls(success=True, value=value, property_name=property_name, test=test)

    @classmethod
    def fail(
        cls, message: str, property_name: Optional[str] = None, test: bool = False
    ) -> "ModResult":
        return cls(success=False, property_name=property_name, test=test, message=message)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "success": self.success,
            "value": self.value,
            "property_name": self.property_name,
            "test": self.test,
        }
        if self.message:
            result["message"] = self.message
        return result
