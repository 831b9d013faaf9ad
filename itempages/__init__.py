from .access import Access, Accessors, properties
from .collection import Collection
from .pages import PaginatedCollection
from .scorecard import ScoreCard

__all__ = ['Access', 'Accessors', 'properties', 'Collection',
           'PaginatedCollection', 'ScoreCard']
