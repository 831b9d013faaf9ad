import math

from typing import List

from .utils.misc import average, to_pos_int


class ScoreCard:
    """Running min, max and average over added scores.

    Scores are coerced to non-negative integers (``'1'``, ``1.1`` and ``-1``
    all count as 1); values with no numeric meaning are dropped.
    """

    def __init__(self):
        self._scores: List[int] = []
        self.min = math.inf
        self.max = -math.inf
        self.average = 0

    def add(self, score) -> 'ScoreCard':
        value = to_pos_int(score)

        if value is not None:
            self._scores.append(value)
            self.min = min(self.min, value)
            self.max = max(self.max, value)
            self.average = average(*self._scores)

        return self

    def size(self) -> int:
        return len(self._scores)

    __len__ = size

    @property
    def scores(self) -> List[int]:
        return list(self._scores)
