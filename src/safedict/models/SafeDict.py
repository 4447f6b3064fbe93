"""Namespace-safe dictionary with a write-blocking facade."""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..exceptions import ImmutableWriteRejected, InvalidArgument
from .Absent import ABSENT

log = logging.getLogger(__name__)


def _check_key(key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidArgument(f"SafeDict keys must be strings, got {type(key).__name__}: {key!r}")
    return key


def _check_value(key: str, value: Any) -> Any:
    if value is ABSENT:
        raise InvalidArgument(f"Cannot store the absence marker as the value for {key!r}")
    return value


def _copy_initial(initial: Any) -> Dict[str, Any]:
    """Copy the entries of an initial source into a new backing store.

    Args:
        initial: None, a mapping, another SafeDict, or an iterable of (key, value) pairs

    Returns:
        A fresh dictionary holding the validated entries

    Raises:
        InvalidArgument: If the source is not a key/value structure or holds a non-string key
    """
    if initial is None:
        return {}

    if isinstance(initial, SafeDict):
        pairs = initial.iteritems()
    elif isinstance(initial, Mapping):
        pairs = initial.items()
    elif isinstance(initial, (str, bytes, bytearray)):
        raise InvalidArgument(f"Initial source must be a mapping or key/value pairs, got {type(initial).__name__}")
    else:
        try:
            pairs = iter(initial)
        except TypeError:
            raise InvalidArgument(
                f"Initial source must be a mapping or key/value pairs, got {type(initial).__name__}"
            ) from None

    store = {}
    for index, pair in enumerate(pairs):
        try:
            key, value = pair
        except (TypeError, ValueError):
            raise InvalidArgument(f"Initial entry #{index} is not a (key, value) pair: {pair!r}") from None
        key = _check_key(key)
        store[key] = _check_value(key, value)
    return store


class SafeDict:
    """A key/value store whose keys can never collide with its own members.

    Entries live in a private dictionary, so any string is a valid key,
    including names such as ``"get"``, ``"__class__"`` or ``""``. The instance
    itself is sealed: attributes and items can only change through ``set`` and
    ``delete``, and any other write raises ImmutableWriteRejected.

    Reading an unknown public attribute forwards to ``get``::

        d = SafeDict({"colour": "blue"})
        d.colour   # "blue"
        d.size     # ABSENT

    No ordering guarantee is made for keys(), values(), items() or iteration.
    """

    __slots__ = ("_store",)

    def __init__(self, initial: Optional[Any] = None):
        """Initialize the dict from an optional initial source.

        Args:
            initial: A mapping, another SafeDict, or an iterable of (key, value)
                pairs. Entries are copied, never aliased. If None, starts empty.

        Raises:
            ImmutableWriteRejected: If called again on an already initialized dict
        """
        try:
            object.__getattribute__(self, "_store")
        except AttributeError:
            pass
        else:
            log.debug("Rejected re-initialization of SafeDict")
            raise ImmutableWriteRejected("re-initialization")
        object.__setattr__(self, "_store", _copy_initial(initial))
        log.debug("Created SafeDict with %d entries", len(self._store))

    def get(self, key: str, default: Any = ABSENT) -> Any:
        """Get the value for a key, or ``default`` (ABSENT unless given) if it is missing."""
        return self._store.get(_check_key(key), default)

    def set(self, key: str, value: Any) -> None:
        """Set the value for a key, replacing any existing value.

        Any value may be stored except the ABSENT marker itself, which is
        rejected so that a miss from get() can never be mistaken for a value.

        Raises:
            InvalidArgument: If the key is not a string or the value is ABSENT
        """
        key = _check_key(key)
        self._store[key] = _check_value(key, value)

    def has(self, key: str) -> bool:
        """Return whether a key is in the dict."""
        return _check_key(key) in self._store

    def delete(self, key: str) -> bool:
        """Delete a key from the dict.

        Returns:
            True if the key was found and removed, False if it was absent
        """
        key = _check_key(key)
        if key in self._store:
            del self._store[key]
            return True
        return False

    # List and iterator functions.
    # No guarantees whatsoever are made about the order of elements.

    def keys(self) -> List[str]:
        """Return a list of all the keys."""
        return list(self._store)

    def values(self) -> List[Any]:
        """Return a list of all the values."""
        return list(self._store.values())

    def items(self) -> List[Tuple[str, Any]]:
        """Return a list of all the entries as (key, value) pairs."""
        return list(self._store.items())

    def iterkeys(self) -> Iterator[str]:
        """Iterate over the keys present at call time."""
        return iter(self.keys())

    def itervalues(self) -> Iterator[Any]:
        """Iterate over the values present at call time."""
        return iter(self.values())

    def iteritems(self) -> Iterator[Tuple[str, Any]]:
        """Iterate over the (key, value) pairs present at call time."""
        return iter(self.items())

    def to_string(self) -> str:
        """Return a human-readable rendering such as ``{a: 1, b: 2}``."""
        return "{" + ", ".join(f"{key}: {value}" for key, value in self._store.items()) + "}"

    def __getattr__(self, name: str) -> Any:
        """Forward reads of unknown public attributes to get()."""
        if name.startswith("_"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return self._store.get(name, ABSENT)

    def __setattr__(self, name: str, value: Any) -> None:
        log.debug("Rejected attribute assignment %r on SafeDict", name)
        raise ImmutableWriteRejected("attribute assignment", name)

    def __delattr__(self, name: str) -> None:
        log.debug("Rejected attribute deletion %r on SafeDict", name)
        raise ImmutableWriteRejected("attribute deletion", name)

    def __getitem__(self, key: str) -> Any:
        """Provide mapping-style access; raises KeyError on a miss."""
        return self._store[_check_key(key)]

    def __setitem__(self, key: str, value: Any) -> None:
        log.debug("Rejected item assignment %r on SafeDict", key)
        raise ImmutableWriteRejected("item assignment", key)

    def __delitem__(self, key: str) -> None:
        log.debug("Rejected item deletion %r on SafeDict", key)
        raise ImmutableWriteRejected("item deletion", key)

    def __contains__(self, key: Any) -> bool:
        """Support the 'in' operator; non-string keys are never present."""
        return isinstance(key, str) and key in self._store

    def __iter__(self) -> Iterator[str]:
        return self.iterkeys()

    def __len__(self) -> int:
        return len(self._store)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SafeDict):
            return self._store == other._store
        return NotImplemented

    __hash__ = None

    def __dir__(self) -> List[str]:
        """List exactly the logical keys."""
        return self.keys()

    def __reduce__(self):
        return (type(self), (self.items(),))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._store!r})"
