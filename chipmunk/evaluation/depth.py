from __future__ import annotations

from typing import NamedTuple

from chipmunk import config
from chipmunk.errors import StackExhausted


class Depth(NamedTuple):
    """Evaluation depth counter threaded through every recursive evaluate call."""

    level: int
    limit: int

    @classmethod
    def root(cls, limit: int | None = None) -> Depth:
        return cls(0, limit if limit is not None else config.get_max_depth())

    def deeper(self) -> Depth:
        if self.level >= self.limit:
            raise StackExhausted(self.limit)
        return Depth(self.level + 1, self.limit)
