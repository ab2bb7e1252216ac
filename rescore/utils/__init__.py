"""
Shared utilities for RESCORE.

Common functionality used across contexts:
- Logger setup
- Text report formatting
- Timestamps
"""

from rescore.utils.timestamp import now

__all__ = ["now"]
