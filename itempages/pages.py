from typing import Any, Callable, Iterator, List, Optional

from .collection import Collection
from .utils.misc import chunk, to_pos_int


class PaginatedCollection:
    """A `Collection` cut into pages of `page_size` items with a page cursor.

    Every change of membership or page size rebuilds the pages from scratch,
    so pages are throwaway `Collection` objects. The cursor is left alone by
    a rebuild and may point past the last page until the next navigation.

    The collection methods (``len()``, ``in``, `get`, `to_list`) work on
    items, while iterating yields pages, so ``len(pages)`` is the item count
    and `n_pages` is the page count.

        >>> pages = PaginatedCollection([1, 2, 3, 4, 5], page_size=3)
        >>> pages.first().to_list(), pages.next().to_list()
        ([1, 2, 3], [4, 5])
        >>> pages.next() is None
        True
    """

    def __init__(self, initial=None, *, page_size=1):
        self.collection = Collection(initial)
        self.current_page = 0
        self._page_size = 1
        self._pages: List[Collection] = []

        self.set_page_size(page_size)

    def _paginate(self):
        self._pages = [Collection(run)
                       for run in chunk(self.collection, self._page_size)]

    # Collection interface

    def contains(self, item) -> bool:
        return self.collection.contains(item)

    __contains__ = contains

    def add(self, item) -> 'PaginatedCollection':
        """Add `item` and repaginate; a duplicate is a no-op."""
        if not self.collection.contains(item):
            self.collection.add(item)
            self._paginate()

        return self

    def remove(self, item) -> bool:
        removed = self.collection.remove(item)

        if removed:
            self._paginate()

        return removed

    def get(self, index, default=None):
        return self.collection.get(index, default)

    def size(self) -> int:
        return self.collection.size()

    __len__ = size

    def to_list(self) -> List[Any]:
        return self.collection.to_list()

    def each(self, handler: Callable[[Any, int], Any]):
        self.collection.each(handler)

    # Pagination

    @property
    def page_size(self) -> int:
        return self._page_size

    @page_size.setter
    def page_size(self, size):
        self.set_page_size(size)

    def set_page_size(self, size):
        """Set the page size (coerced to a positive int, 1 if that fails) and repaginate."""
        self._page_size = to_pos_int(size) or 1
        self._paginate()

    @property
    def n_pages(self) -> int:
        return len(self._pages)

    @property
    def current_offset(self):
        return self.current_page * self._page_size

    def index(self, page) -> Optional[Collection]:
        if isinstance(page, int) and 0 <= page < len(self._pages):
            return self._pages[page]

        return None

    def current(self) -> Optional[Collection]:
        return self.index(self.current_page)

    def first(self) -> Optional[Collection]:
        """Seek to the first page and return it."""
        self.current_page = 0
        return self.current()

    def last(self) -> Optional[Collection]:
        """Seek to the last page and return it; with no pages the cursor is -1."""
        self.current_page = self.n_pages - 1
        return self.current()

    def next(self) -> Optional[Collection]:
        """Seek to the next page; None (and no move) if at the last page."""
        page = self.index(self.current_page + 1)

        if page is not None:
            self.current_page += 1

        return page

    def previous(self) -> Optional[Collection]:
        """Seek to the previous page; None (and no move) if at the first page."""
        page = self.index(self.current_page - 1)

        if page is not None:
            self.current_page -= 1

        return page

    def iter_pages(self, index=0) -> Iterator[Collection]:
        index = to_pos_int(index) or 0

        while index < len(self._pages):
            yield self._pages[index]
            index += 1

    def __iter__(self):
        return self.iter_pages(0)

    def __repr__(self):
        return (f'{type(self).__name__}({self.collection.to_list()!r}, '
                f'page_size={self._page_size})')
