"""Factory functions for building SafeDict instances."""

import logging
from pathlib import Path
from typing import Any, Optional

from ..models import SafeDict
from ..utils.config import load_seed

log = logging.getLogger(__name__)


def create(initial: Optional[Any] = None) -> SafeDict:
    """Create a SafeDict from an optional initial source.

    Args:
        initial: A mapping, another SafeDict, or an iterable of (key, value) pairs.
            Entries are copied, so later changes to ``initial`` do not affect the
            dict. If None, the dict starts empty.

    Returns:
        A new SafeDict

    Raises:
        InvalidArgument: If ``initial`` is not a key/value structure or holds a non-string key

    Example:
        d = create({"x": 10})
        d.set("y", 20)
        d.delete("x")
        d.items()  # [("y", 20)]
    """
    return SafeDict(initial)


def create_from_seed(seed_path: Path) -> SafeDict:
    """Create a SafeDict from the entries of a YAML seed file.

    Args:
        seed_path: Path to the seed file

    Returns:
        A new SafeDict holding the seed's entries

    Raises:
        FileNotFoundError: If the seed file does not exist
        InvalidArgument: If the seed file fails validation
    """
    seed = load_seed(seed_path)
    log.debug("Loaded %d entries from seed %s", len(seed.entries), seed_path)
    return SafeDict(seed.entries)
