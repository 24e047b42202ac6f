from pydantic import BaseModel, ConfigDict
from typing import Any, Optional


class BaseGolfModel(BaseModel):
    """Shared configuration and coercion helpers."""
    model_config = ConfigDict(validate_assignment=True, extra="ignore")


def to_int(value: Any) -> Optional[int]:
    """Coerce a registry value to int, returning None when it won't parse."""
    number = to_float(value)
    return int(number) if number is not None else None


def to_float(value: Any) -> Optional[float]:
    """Coerce a registry value to float, returning None when it won't parse."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    return number


def to_flag(value: Any) -> bool:
    """Registry flags arrive as bools, "true"/"false" strings, or 0/1."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "y")
    return bool(value)


def to_display(value: Any) -> Optional[str]:
    """Handicap displays are strings ("14.2", "+1.3", "NH"); numbers are stringified."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None
