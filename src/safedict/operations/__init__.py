"""SafeDict operations."""

from .construct import create, create_from_seed

__all__ = [
    "create",
    "create_from_seed",
]
