from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Trimmed text, or None when blank."""
    if value is None:
        return None
    value = value.strip()
    return value or None
