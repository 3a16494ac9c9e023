"""A set of items of a single hashable type, stored as the keys of a dict."""

import itertools
import logging
from collections.abc import Hashable, Iterable, Iterator
from typing import Any, Generic, Optional, TypeVar

from pydantic import NonNegativeInt, TypeAdapter

from .settings import settings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

ELLIPSIS = "…"
"""
The marker appended to a rendering that was cut off by `max_render_items`.
"""

_max_render_items_adapter = TypeAdapter(NonNegativeInt)


class ConcurrentModificationError(RuntimeError):
    """Raised when a set is modified while it is being iterated over."""

    pass


class AASetIterator(Generic[T]):
    """Iterator over the members of an `AASet` which fails fast if the set
    changes underneath it."""

    def __init__(self, aaset: "AASet[T]"):
        self._aaset = aaset
        self._mutations = aaset._mutations
        self._it = iter(aaset._items)
        self._done = False

    def __iter__(self) -> "AASetIterator[T]":
        return self

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        if self._aaset._mutations != self._mutations:
            raise ConcurrentModificationError(
                "set was modified during iteration",
            )
        try:
            return next(self._it)
        except StopIteration:
            # stay exhausted even if the set changes later
            self._done = True
            self._it = iter(())
            raise


class AASet(Generic[T]):
    """
    A collection that stores unique items of the same type.

    Items are the keys of a dict whose values carry no information, so
    the item type must support hashing and equality. Iteration order is
    unspecified and must not be relied upon.

    Parameters
    ----------
    items : iterable, optional
        The initial items. Duplicates collapse to a single member.
    max_render_items : int, optional
        How many items `render()` shows before cutting off with an ellipsis.
        0 renders everything. If not given, the configured default
        (``AASET_MAX_RENDER_ITEMS``) is used.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        items: Iterable[T] = (),
        *,
        max_render_items: Optional[int] = None,
    ):
        self._items: dict[T, None] = dict.fromkeys(items)
        self._mutations = 0
        self._max_render_items: Optional[int] = None
        if max_render_items is not None:
            self.max_render_items = max_render_items

    @classmethod
    def from_items(
        cls, items: Iterable[T], *, max_render_items: Optional[int] = None
    ) -> "AASet[T]":
        """Create a set holding the unique elements of `items`."""
        return cls(items, max_render_items=max_render_items)

    @property
    def max_render_items(self) -> int:
        """The maximum number of items shown by `render()`, 0 for all.

        Sets created without an explicit limit read the configured default
        each time this is accessed.
        """
        if self._max_render_items is None:
            return settings().max_render_items
        return self._max_render_items

    @max_render_items.setter
    def max_render_items(self, value: int) -> None:
        self._max_render_items = _max_render_items_adapter.validate_python(
            value, strict=True
        )

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __contains__(self, item: Any) -> bool:
        return item in self._items

    def contains(self, item: T) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return AASetIterator(self)

    def iterate(self) -> Iterator[T]:
        """Iterate over the members in no particular order.

        Adding or removing members before the iterator is exhausted makes
        the next step raise `ConcurrentModificationError`.
        """
        return iter(self)

    def add(self, item: T) -> bool:
        """Add an item.

        Returns
        -------
        added : bool
            True if the item was not already a member.
        """
        if item in self._items:
            return False
        self._items[item] = None
        self._mutations += 1
        return True

    def add_all(self, items: Iterable[T]) -> int:
        """Add every item of `items`, returning how many were new."""
        return sum(self.add(item) for item in items)

    def remove(self, item: T) -> bool:
        """Remove an item if present.

        Returns
        -------
        removed : bool
            True if the item was a member (and so was removed), False otherwise.
        """
        if item not in self._items:
            return False
        del self._items[item]
        self._mutations += 1
        return True

    def clear(self) -> None:
        if self._items:
            self._items.clear()
            self._mutations += 1

    def duplicate(self) -> "AASet[T]":
        """Return an independent copy with the same members and render limit.

        The items themselves are shared, not copied.
        """
        new = self.__class__(max_render_items=0)
        new._max_render_items = self._max_render_items
        new._items = self._items.copy()
        return new

    copy = duplicate
    __copy__ = duplicate

    def _check_operand(self, other: Any, op: str) -> None:
        if not isinstance(other, AASet):
            raise TypeError(
                f"{op}() argument must be an AASet, not {type(other).__name__!r}"
            )

    def _merged_render_limit(self, other: "AASet[T]") -> Optional[int]:
        # two unconfigured operands give an unconfigured result
        if self._max_render_items is None and other._max_render_items is None:
            return None
        return max(self.max_render_items, other.max_render_items)

    def intersection(self, other: "AASet[T]") -> "AASet[T]":
        """Return a new set of the items in both `self` and `other`."""
        self._check_operand(other, "intersection")
        logger.debug("intersection of sets of sizes %d and %d", len(self), len(other))
        small, large = (self, other) if len(self) <= len(other) else (other, self)
        new = self.__class__()
        new._max_render_items = self._merged_render_limit(other)
        new._items = {item: None for item in small._items if item in large._items}
        return new

    intersect = intersection

    def intersection_update(self, other: "AASet[T]") -> None:
        """Keep only the items of `self` that are also in `other`."""
        self._check_operand(other, "intersection_update")
        logger.debug(
            "in-place intersection of sets of sizes %d and %d", len(self), len(other)
        )
        drop = [item for item in self._items if item not in other._items]
        for item in drop:
            del self._items[item]
        if drop:
            self._mutations += 1

    def union(self, other: "AASet[T]") -> "AASet[T]":
        """Return a new set of the items in `self`, `other` or both."""
        self._check_operand(other, "union")
        logger.debug("union of sets of sizes %d and %d", len(self), len(other))
        new = self.duplicate()
        new._max_render_items = self._merged_render_limit(other)
        new._items.update(other._items)
        return new

    def update(self, other: "AASet[T]") -> None:
        """Add every item of `other` to `self`."""
        self._check_operand(other, "update")
        logger.debug("in-place union of sets of sizes %d and %d", len(self), len(other))
        size = len(self._items)
        self._items.update(other._items)
        if len(self._items) != size:
            self._mutations += 1

    def __and__(self, other: Any) -> "AASet[T]":
        if not isinstance(other, AASet):
            return NotImplemented
        return self.intersection(other)

    def __iand__(self, other: Any) -> "AASet[T]":
        if not isinstance(other, AASet):
            return NotImplemented
        self.intersection_update(other)
        return self

    def __or__(self, other: Any) -> "AASet[T]":
        if not isinstance(other, AASet):
            return NotImplemented
        return self.union(other)

    def __ior__(self, other: Any) -> "AASet[T]":
        if not isinstance(other, AASet):
            return NotImplemented
        self.update(other)
        return self

    def __eq__(self, other: Any) -> bool:
        # membership only, the render limit is presentation state
        if isinstance(other, AASet):
            return self._items.keys() == other._items.keys()
        elif isinstance(other, (set, frozenset)):
            return self._items.keys() == other
        return NotImplemented

    def render(self) -> str:
        """Render the set as ``{item1, item2, ...}`` for debugging and tests.

        Items appear in iteration order. If `max_render_items` is nonzero and
        the set is larger, only that many items are shown followed by an
        ellipsis, e.g. ``{a, b, …}``.
        """
        limit = self.max_render_items
        if limit and len(self._items) > limit:
            parts = [str(item) for item in itertools.islice(self._items, limit)]
            parts.append(ELLIPSIS)
        else:
            parts = [str(item) for item in self._items]
        return "{" + ", ".join(parts) + "}"

    __str__ = render

    def __repr__(self) -> str:
        args = []
        limit = self.max_render_items
        if self._items:
            args.append("{" + ", ".join(repr(item) for item in self._items) + "}")
        if limit:
            args.append(f"max_render_items={limit}")
        return f"{self.__class__.__name__}({', '.join(args)})"
