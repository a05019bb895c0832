"""Depth-first block search driven one transition at a time.

The controller keeps a single cursor shared by every depth of the partial
solution.  Each call to :meth:`SearchController.step` performs exactly one
of the transitions below, checked in this order:

``EXTEND``
    The partial solution holds B rows: emit it, pop the last row and
    resume scanning just past it.
``PROBE``
    The row under the cursor is valid: push it.  The cursor stays put; the
    pushed row excludes itself, so the next step advances.
``ADVANCE``
    Move the cursor one row forward, provided a later row exists and the
    mask is not empty.
``BACKTRACK``
    Pop the last row and resume scanning just past it.
``DONE``
    Nothing left to pop: the search is exhausted.

Rows enter the partial solution in strictly increasing index order, so
every set of rows is visited once.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from .model import Parameters, SearchStateError, Solution, Transition
from .rows import RowStore
from .validity import ValidityTracker

LOG = logging.getLogger(__name__)

SolutionCallback = Callable[[Solution], None]


def root_range_mask(lo: int, hi: int) -> int:
    """Bitmask of row indices in ``[lo, hi)``."""
    if hi <= lo:
        return 0
    return ((1 << hi) - 1) ^ ((1 << lo) - 1)


class SearchController:

    def __init__(
        self,
        params: Parameters,
        store: Optional[RowStore] = None,
        prune: Optional[bool] = None,
        sink: Optional[SolutionCallback] = None,
        first_rows: Optional[range] = None,
    ) -> None:
        self.params = params
        self.store = store if store is not None else RowStore.build(params.n, params.k)
        if len(self.store) != params.num_rows:
            raise ValueError(f"row store holds {len(self.store)} rows, "
                             f"expected C({params.n},{params.k}) = {params.num_rows}")
        if prune is None:
            prune = params.default_prune()
        elif prune and not params.default_prune():
            LOG.warning("structural pruning forced on for n=%d k=%d t=%d; "
                        "it is only known to be complete for admissible t <= 2",
                        params.n, params.k, params.t)
        self.prune = prune
        self.sink = sink
        if first_rows is None:
            first_rows = range(params.num_rows)
        self.first_rows = range(max(first_rows.start, 0),
                                min(first_rows.stop, params.num_rows))
        self.tracker = ValidityTracker(
            self.store, params, prune=prune,
            root_mask=root_range_mask(self.first_rows.start, self.first_rows.stop))
        self.reset()

    def reset(self) -> None:
        """Return to the initial state; counters start over."""
        self.tracker.reset()
        self.cursor = self.first_rows.start
        self.steps = 0
        self.emitted = 0
        self._solution: Optional[Solution] = None
        self._done = False

    def step(self) -> Transition:
        """Perform one transition.

        A full stack holding a row outside its pruning range is not emitted;
        its mask is empty, so the step falls through to BACKTRACK.
        """
        if self._done:
            return Transition.DONE
        self.steps += 1
        self._solution = None
        tracker = self.tracker
        num_rows = self.params.num_rows

        if len(tracker) == self.params.blocks and not tracker.pruned:
            solution = tuple(tracker.positions)
            self._solution = solution
            self.emitted += 1
            LOG.debug("solution %d after %d steps: %s", self.emitted, self.steps, solution)
            if self.sink is not None:
                self.sink(solution)
            self.cursor = tracker.pop() + 1
            return Transition.EXTEND

        mask = tracker.mask
        if self.cursor < num_rows and mask >> self.cursor & 1:
            tracker.push(self.cursor)
            return Transition.PROBE

        if self.cursor < num_rows - 1 and mask:
            self.cursor += 1
            return Transition.ADVANCE

        if tracker.positions:
            self.cursor = tracker.pop() + 1
            return Transition.BACKTRACK

        self._done = True
        LOG.info("search n=%d k=%d t=%d rows %d..%d finished: %d solutions in %d steps",
                 self.params.n, self.params.k, self.params.t,
                 self.first_rows.start, self.first_rows.stop,
                 self.emitted, self.steps)
        return Transition.DONE

    def current_solution(self) -> Solution:
        if self._solution is None:
            raise SearchStateError("the last step did not emit a solution")
        return self._solution

    def is_done(self) -> bool:
        return self._done

    def run(self, limit: Optional[int] = None) -> Iterator[Solution]:
        """Step until done, yielding each solution; stop early after ``limit``."""
        produced = 0
        while limit is None or produced < limit:
            transition = self.step()
            if transition is Transition.EXTEND:
                produced += 1
                yield self._solution
            elif transition is Transition.DONE:
                return

    def count(self) -> int:
        return sum(1 for _ in self.run())
