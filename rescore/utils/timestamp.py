"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Compact local timestamp for session directory names.

    Returns:
        Timestamp string like "20251114_123456"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
