from typing import Any, Optional


def format_value(value: Any, fallback: str) -> str:
    """
    Render a prompt value, substituting `fallback` for missing ones.
    Zero and empty strings count as missing, matching how the web client
    renders unset quiz answers. Integral floats drop their ".0".
    """
    if value is None or value == "" or value == 0:
        return fallback
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def first_present(*values: Optional[float]) -> Optional[float]:
    """Actual-over-planned lookup: first value that is set and non-zero."""
    for value in values:
        if value:
            return value
    return None
