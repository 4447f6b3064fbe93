"""SafeDict models.

This module provides the SafeDict container and the absence marker that its
lookups return for missing keys.

Example:
    from safedict.models import ABSENT, SafeDict

    d = SafeDict({"toString": 1})
    d.set("constructor", 2)
    d.get("__proto__") is ABSENT  # True
"""

from .Absent import ABSENT, Absent
from .SafeDict import SafeDict

__all__ = [
    "ABSENT",
    "Absent",
    "SafeDict",
]
