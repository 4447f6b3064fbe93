"""SafeDict: a namespace-safe, mutation-guarded key/value store.

Example:
    from safedict import ABSENT, create

    d = create({"toString": 1, "constructor": 2})
    d.set("__proto__", 3)
    d.get("hasOwnProperty") is ABSENT  # True
    d.delete("toString")  # True
"""

from .exceptions import ImmutableWriteRejected, InvalidArgument, SafeDictException
from .models import ABSENT, Absent, SafeDict
from .operations import create, create_from_seed
from .utils.logging_config import setup_safedict_logging

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Absent",
    "ImmutableWriteRejected",
    "InvalidArgument",
    "SafeDict",
    "SafeDictException",
    "create",
    "create_from_seed",
    "setup_safedict_logging",
]
