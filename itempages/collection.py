from typing import Any, Callable, Iterator, List

from .utils.misc import clone, is_array_like, to_pos_int


class Collection:
    """Ordered set of unique items.

    Uniqueness is decided by ``==``, so items need not be hashable. An
    optional array-like `initial` is copied in item by item; duplicates in it
    collapse, anything that is not array-like is ignored.

        >>> c = Collection([1, 2, 2, 3])
        >>> c.to_list()
        [1, 2, 3]
    """

    def __init__(self, initial=None):
        self._items: List[Any] = []

        if is_array_like(initial):
            for item in initial:
                self.add(item)

    def contains(self, item) -> bool:
        return item in self._items

    __contains__ = contains

    def add(self, item) -> 'Collection':
        """Append `item` unless already present; returns self for chaining."""
        if not self.contains(item):
            self._items.append(item)

        return self

    def remove(self, item) -> bool:
        """Remove `item`; False if it wasn't there."""
        try:
            self._items.remove(item)
        except ValueError:
            return False

        return True

    def _exists(self, index) -> bool:
        index = to_pos_int(index)
        return index is not None and index < len(self._items)

    def get(self, index, default=None):
        """Item at `index`, or `default`.

        The index is coerced the lenient way (`'2'` is 2, `-3` is 3, `2.7` is
        2); indices that aren't numbers or are out of range give `default`
        rather than an exception.
        """
        if self._exists(index):
            return self._items[to_pos_int(index)]

        return default

    def size(self) -> int:
        return len(self._items)

    __len__ = size

    def to_list(self) -> List[Any]:
        """Copy of the items; changing it won't touch the collection."""
        return clone(self._items)

    def each(self, handler: Callable[[Any, int], Any]):
        """Call ``handler(item, index)`` for every item, stopping once it returns False."""
        for i, item in enumerate(self._items):
            if handler(item, i) is False:
                break

    def iter_from(self, index=0) -> Iterator[Any]:
        index = to_pos_int(index) or 0

        # Reads the live list, so each step sees the current length.
        while index < len(self._items):
            yield self._items[index]
            index += 1

    def __iter__(self):
        return self.iter_from(0)

    def __repr__(self):
        return f'{type(self).__name__}({self._items!r})'
