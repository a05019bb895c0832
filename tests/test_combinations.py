from itertools import combinations

import pytest

from steiner.core.combinations import binomial, enumerate_rows, rank, row_elements, unrank


@pytest.mark.parametrize("n,k", [(4, 1), (4, 2), (7, 3), (9, 3), (10, 4), (8, 7)])
def test_rows_are_all_k_subsets(n, k):
    rows = enumerate_rows(n, k)
    assert len(rows) == binomial(n, k)
    assert len(set(rows)) == len(rows)
    assert all(row.bit_count() == k for row in rows)
    assert [tuple(row_elements(r)) for r in rows] == list(combinations(range(n), k))


@pytest.mark.parametrize("n,k", [(4, 2), (7, 3), (9, 3), (10, 5)])
def test_rank_inverts_unrank(n, k):
    for i in range(binomial(n, k)):
        assert rank(unrank(i, n, k), n, k) == i


def test_rows_with_element_zero_come_first():
    n, k = 9, 3
    bound = binomial(n - 1, k - 1)
    rows = enumerate_rows(n, k)
    assert all(row & 1 for row in rows[:bound])
    assert not any(row & 1 for row in rows[bound:])
    second = bound + binomial(n - 2, k - 1)
    assert all(row & 2 for row in rows[bound:second])
    assert not any(row & 3 for row in rows[second:])


def test_unrank_endpoints():
    assert unrank(0, 7, 3) == 0b0000111
    assert unrank(34, 7, 3) == 0b1110000
    assert unrank(15, 7, 3) == 0b0001110


def test_binomial():
    assert binomial(9, 3) == 84
    assert binomial(5, 0) == 1
    assert binomial(3, 5) == 0
    assert binomial(3, -1) == 0


def test_row_elements():
    assert list(row_elements(0b1010010)) == [1, 4, 6]
    assert list(row_elements(0)) == []
