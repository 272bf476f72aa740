from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_present(value: Any, message: str) -> Any:
    """Null check only: names are neither trimmed nor normalized."""
    if not value:
        raise ValidationError(message)
    return value
