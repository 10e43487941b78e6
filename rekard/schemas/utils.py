"""
Utility functions for schema validation.
"""
from typing import Optional


def require_text(v: Optional[str], field_name: str) -> str:
    """
    Trim surrounding whitespace and reject empty text.

    Args:
        v: Raw text value
        field_name: Name used in the error message

    Returns:
        Trimmed text
    """
    if v is None or not v.strip():
        raise ValueError(f"{field_name} cannot be missing or empty")
    return v.strip()


def optional_text(v: Optional[str], field_name: str) -> Optional[str]:
    """Like require_text, but None means "leave unchanged"."""
    if v is None:
        return None
    return require_text(v, field_name)
