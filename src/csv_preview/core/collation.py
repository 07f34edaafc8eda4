"""
Locale-aware string ordering backed by QCollator.
"""

from functools import lru_cache
from typing import Optional

from PySide6.QtCore import QCollator, QLocale


@lru_cache(maxsize=8)
def get_collator(locale_name: Optional[str] = None) -> QCollator:
    """
    Return a shared collator for a locale.

    Args:
        locale_name: BCP 47 / POSIX name such as "fr_FR"; None uses the system locale
    """
    locale = QLocale(locale_name) if locale_name else QLocale.system()
    collator = QCollator(locale)
    collator.setNumericMode(False)
    return collator


def locale_compare(left: str, right: str, locale_name: Optional[str] = None) -> int:
    """Compare two strings; negative, zero or positive like a cmp function."""
    if left == right:
        return 0
    result = get_collator(locale_name).compare(left, right)
    if result == 0:
        # Collation can tie on distinct strings; fall back to code points
        return -1 if left < right else 1
    return result
