"""Per-method route storage.

Entries are kept in registration order within each method bucket.
The table owns no server reference and is never touched by
``apply_routes()``, which only reads it.
"""

from collections.abc import Iterator

from routekit.routing.route import METHODS, RouteEntry, check_method


class RouteTable:
    """Ordered, per-method storage of ``RouteEntry`` values.

    Duplicate method+path entries are kept as-is; servers resolve them
    (typically by version).
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, list[RouteEntry]] = {method: [] for method in METHODS}

    def append(self, entry: RouteEntry) -> None:
        """Append *entry* to its method bucket."""
        self._entries[entry.method].append(entry)

    def routes(self, method: str) -> tuple[RouteEntry, ...]:
        """Return a snapshot of *method*'s entries in registration order.

        Raises ``ValueError`` for methods outside ``METHODS``.
        """
        return tuple(self._entries[check_method(method)])

    def __iter__(self) -> Iterator[RouteEntry]:
        """Every entry, methods in ``METHODS`` order."""
        for method in METHODS:
            yield from self._entries[method]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._entries.values())

    def __bool__(self) -> bool:
        return any(self._entries.values())

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{method}={len(bucket)}" for method, bucket in self._entries.items() if bucket
        )
        return f"RouteTable({counts})"
