"""Tracking which rows may extend the current partial solution.

The mask is a Python integer with one bit per row index.  Each chosen row
contributes its compatibility vector; the mask is the AND of all of them,
further restricted by the root range that limits the first chosen row.

With structural pruning on, slot ``i`` of the partial solution must hold a
row containing element 0 while ``i < r``, and a row containing element 0 or
element 1 while ``r <= i < 2r - 1``.  A slot holding anything else empties
the mask so the controller backtracks at once.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .model import Parameters, RowIndex
from .rows import RowStore

LOG = logging.getLogger(__name__)


def violates_bound(params: Parameters, slot: int, index: RowIndex) -> bool:
    bound = params.slot_bound(slot)
    return bound is not None and index >= bound


def recompute_mask(
    store: RowStore,
    params: Parameters,
    positions: Sequence[RowIndex],
    prune: bool,
    root_mask: Optional[int] = None,
) -> int:
    """Derive the validity mask for ``positions`` from scratch.

    ``root_mask`` only constrains the first row, so it is the answer for an
    empty partial solution and plays no part once a row is chosen.
    """
    if not positions:
        return store.full_mask if root_mask is None else root_mask
    mask = store.full_mask
    for slot, index in enumerate(positions):
        if prune and violates_bound(params, slot, index):
            return 0
        mask &= store.compatibility(index, params.t)
    return mask


class ValidityTracker:
    """Incrementally maintained validity mask for one partial solution."""

    def __init__(self, store: RowStore, params: Parameters, prune: bool = True,
                 root_mask: Optional[int] = None) -> None:
        self.store = store
        self.params = params
        self.prune = prune
        self.root_mask = store.full_mask if root_mask is None else root_mask
        self.positions: List[RowIndex] = []
        self._masks: List[int] = [self.root_mask]
        self._violation: Optional[int] = None

    def reset(self) -> None:
        self.positions.clear()
        self._masks[:] = [self.root_mask]
        self._violation = None

    def push(self, index: RowIndex) -> None:
        slot = len(self.positions)
        self.positions.append(index)
        base = self._masks[-1] if slot else self.store.full_mask
        self._masks.append(base & self.store.compatibility(index, self.params.t))
        if self.prune and self._violation is None and violates_bound(self.params, slot, index):
            self._violation = slot

    def pop(self) -> RowIndex:
        index = self.positions.pop()
        self._masks.pop()
        if self._violation == len(self.positions):
            self._violation = None
        return index

    @property
    def pruned(self) -> bool:
        return self._violation is not None

    @property
    def mask(self) -> int:
        if self._violation is not None:
            return 0
        return self._masks[-1]

    @property
    def is_empty(self) -> bool:
        return self.mask == 0

    def is_valid(self, index: RowIndex) -> bool:
        return bool(self.mask >> index & 1)

    def __len__(self) -> int:
        return len(self.positions)
