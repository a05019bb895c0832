"""Lexicographic ranking and unranking of k-subsets.

A row is an ``n``-bit integer where bit ``j`` stands for universe element
``j``.  Rows are numbered in lexicographic order of their sorted element
lists, so every row containing element 0 precedes every row that does not,
and among those without element 0 the rows containing element 1 come first.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator, List


@lru_cache(maxsize=None)
def binomial(n: int, k: int) -> int:
    if k < 0 or n < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        result = result * (n - k + i) // i
    return result


def unrank(index: int, n: int, k: int) -> int:
    """Return the row with the given lexicographic index.

    Walks the universe from element 0 upwards; at each element the number of
    rows that contain it (given the choices so far) decides whether the
    element is taken or skipped.
    """
    row = 0
    kk = k
    ii = index
    for j in range(n):
        if kk == 0:
            break
        below = binomial(n - j - 1, kk - 1)
        if ii < below:
            row |= 1 << j
            kk -= 1
        else:
            ii -= below
    return row


def rank(row: int, n: int, k: int) -> int:
    """Inverse of :func:`unrank`."""
    index = 0
    kk = k
    for j in range(n):
        if kk == 0:
            break
        if row >> j & 1:
            kk -= 1
        else:
            index += binomial(n - j - 1, kk - 1)
    return index


def enumerate_rows(n: int, k: int) -> List[int]:
    return [unrank(i, n, k) for i in range(binomial(n, k))]


def row_elements(row: int) -> Iterator[int]:
    j = 0
    while row:
        if row & 1:
            yield j
        row >>= 1
        j += 1
