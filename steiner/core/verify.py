"""Independent checks on emitted solutions."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Dict, Iterable, List, Sequence

from .combinations import binomial, row_elements
from .model import Parameters, RowIndex
from .rows import RowStore


def solution_problems(store: RowStore, params: Parameters,
                      solution: Sequence[RowIndex]) -> List[str]:
    """Describe every way ``solution`` fails to be a valid block set.

    An empty list means the solution has B entries in strictly increasing
    order and no two rows share t or more elements.
    """
    problems = []
    if len(solution) != params.blocks:
        problems.append(f"expected {params.blocks} rows, got {len(solution)}")
    for a, b in zip(solution, solution[1:]):
        if b <= a:
            problems.append(f"row {b} does not follow row {a} in increasing order")
    for index in solution:
        if not 0 <= index < len(store):
            problems.append(f"row index {index} out of range")
    if problems:
        return problems
    for a, b in combinations(solution, 2):
        shared = store.intersection(a, b)
        if shared >= params.t:
            problems.append(f"rows {a} and {b} share {shared} elements")
    return problems


def is_solution(store: RowStore, params: Parameters, solution: Sequence[RowIndex]) -> bool:
    return not solution_problems(store, params, solution)


def element_coverage(store: RowStore, solution: Iterable[RowIndex]) -> Dict[int, int]:
    counts = Counter()
    for index in solution:
        counts.update(row_elements(store.row(index)))
    return {j: counts.get(j, 0) for j in range(store.n)}


def covers_each_t_subset_once(store: RowStore, params: Parameters,
                              solution: Iterable[RowIndex]) -> bool:
    """True when every t-subset of the universe lies in exactly one row."""
    seen = Counter()
    for index in solution:
        seen.update(combinations(sorted(row_elements(store.row(index))), params.t))
    return (len(seen) == binomial(store.n, params.t)
            and all(c == 1 for c in seen.values()))
