"""Absence marker returned by SafeDict lookups on a missing key."""


class Absent:
    """Singleton marking a key that is not present.

    ``None``, ``False``, ``0`` and ``""`` are all legitimate stored values, so a
    miss is reported with this marker instead. Compare with ``is``.
    """

    _instance = None

    def __new__(cls):
        """Return the shared instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        # Unpickling and copying hand back the singleton
        return (Absent, ())


ABSENT = Absent()
