from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from .combinations import enumerate_rows, rank
from .model import Row, RowIndex


@dataclass(frozen=True)
class RowStore:
    """Immutable table of every k-subset of an n-element universe."""
    n: int
    k: int
    rows: Tuple[Row, ...]
    _compat: Dict[Tuple[RowIndex, int], int] = field(
        default_factory=dict, repr=False, compare=False)

    @classmethod
    def build(cls, n: int, k: int) -> "RowStore":
        return cls(n=n, k=k, rows=tuple(enumerate_rows(n, k)))

    def __len__(self) -> int:
        return len(self.rows)

    def row(self, index: RowIndex) -> Row:
        return self.rows[index]

    def index_of(self, row: Row) -> RowIndex:
        if row.bit_count() != self.k or row >> self.n:
            raise KeyError(f"{row:#x} is not a {self.k}-subset of {self.n} elements")
        return rank(row, self.n, self.k)

    def intersection(self, a: RowIndex, b: RowIndex) -> int:
        return (self.rows[a] & self.rows[b]).bit_count()

    def compatibility(self, index: RowIndex, t: int) -> int:
        """Bitmask over row indices: bit j set iff row j meets ``index`` in fewer than t elements.

        The row itself always meets itself in k >= t elements, so its own bit
        is clear.
        """
        key = (index, t)
        vector = self._compat.get(key)
        if vector is None:
            base = self.rows[index]
            vector = 0
            for j, other in enumerate(self.rows):
                if (base & other).bit_count() < t:
                    vector |= 1 << j
            self._compat[key] = vector
        return vector

    @property
    def full_mask(self) -> int:
        return (1 << len(self.rows)) - 1
