"""Insertion-ordered associative container.

``Collection`` wraps a plain dict and layers the usual functional helpers
(``map``, ``filter``, ``first``, ``reduce``...) on top of it.  Every
transformation returns a new instance of the same class, so subclasses
keep their own methods after a ``filter`` or ``map``.

Callbacks receive ``(value, key)``.  All lookups by predicate are linear
scans; there is no secondary index.
"""

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from functools import reduce as _reduce
from typing import Any, Self

Callback = Callable[[Any, Hashable], Any]


class Collection:
    """An ordered ``key -> value`` mapping with positional helpers."""

    def __init__(self, items: "Collection | Mapping | Iterable | None" = None) -> None:
        if items is None:
            self._items: dict[Hashable, Any] = {}
        elif isinstance(items, Collection):
            self._items = items.all()
        elif isinstance(items, Mapping):
            self._items = dict(items)
        else:
            self._items = dict(enumerate(items))

    @classmethod
    def make(cls, items: "Collection | Mapping | Iterable | None" = None) -> Self:
        return cls(items)

    def all(self) -> dict[Hashable, Any]:
        """Return a shallow copy of the underlying dict."""
        return dict(self._items)

    def keys(self) -> "Collection":
        return Collection(list(self._items))

    def values(self) -> Self:
        """Return the values re-indexed from zero."""
        return self.make(list(self._items.values()))

    # ------------------------------------------------------------------
    # Keyed access
    # ------------------------------------------------------------------

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._items.get(key, default)

    def put(self, key: Hashable, value: Any) -> None:
        self._items[key] = value

    def push(self, value: Any) -> Self:
        """Append ``value`` under the next free integer key."""
        int_keys = [k for k in self._items if isinstance(k, int)]
        self._items[max(int_keys) + 1 if int_keys else 0] = value
        return self

    def __getitem__(self, key: Hashable) -> Any:
        return self._items.get(key)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self._items[key] = value

    def __delitem__(self, key: Hashable) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items.values())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def each(self, callback: Callback) -> Self:
        """Call ``callback`` for every item; stop early if it returns False."""
        for key, value in self._items.items():
            if callback(value, key) is False:
                break
        return self

    def map(self, callback: Callback) -> Self:
        return self.make({key: callback(value, key) for key, value in self._items.items()})

    def filter(self, callback: Callback | None = None) -> Self:
        """Keep the items for which ``callback`` is truthy, preserving keys.

        Without a callback, falsy values are dropped.
        """
        if callback is None:
            return self.make({key: value for key, value in self._items.items() if value})
        return self.make(
            {key: value for key, value in self._items.items() if callback(value, key)}
        )

    def reject(self, callback: Callback) -> Self:
        return self.filter(lambda value, key: not callback(value, key))

    def only(self, keys: Iterable[Hashable]) -> Self:
        wanted = set(keys)
        return self.filter(lambda value, key: key in wanted)

    def pluck(self, attr: str) -> "Collection":
        def _pick(item: Any, key: Hashable) -> Any:
            if isinstance(item, Mapping):
                return item.get(attr)
            return getattr(item, attr, None)

        return Collection({key: _pick(value, key) for key, value in self._items.items()})

    def unique(self) -> Self:
        """Drop repeated values, keeping the first key each value was seen under."""
        seen: list[Any] = []
        kept: dict[Hashable, Any] = {}
        for key, value in self._items.items():
            if value not in seen:
                seen.append(value)
                kept[key] = value
        return self.make(kept)

    def reduce(self, callback: Callable[[Any, Any], Any], initial: Any) -> Any:
        return _reduce(callback, self._items.values(), initial)

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------

    def first(self, callback: Callback | None = None, default: Any = None) -> Any:
        """Return the first value matching ``callback`` (or the first value at all)."""
        if callback is None:
            return next(iter(self._items.values()), default)
        for key, value in self._items.items():
            if callback(value, key):
                return value
        return default

    def search(self, needle: Any) -> Hashable | None:
        """Return the key of the first value equal to (or satisfying) ``needle``."""
        for key, value in self._items.items():
            if callable(needle) and not isinstance(needle, type):
                if needle(value, key):
                    return key
            elif value == needle:
                return key
        return None

    def contains(self, callback: Callback) -> bool:
        return self.search(callback) is not None

    def implode(self, glue: str) -> str:
        return glue.join(str(value) for value in self._items.values())
