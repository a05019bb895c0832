from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .combinations import binomial

LOG = logging.getLogger(__name__)

RowIndex = int
Row = int
Solution = Tuple[RowIndex, ...]


class SteinerError(Exception):
    """Base class for every error raised by the block search."""


class InvalidParameters(SteinerError, ValueError):
    """n, k, t do not satisfy n > k > t >= 1."""


class SearchStateError(SteinerError, RuntimeError):
    """The controller was queried in a state where the answer is undefined."""


class ConfigError(SteinerError, ValueError):
    """A run configuration could not be understood."""


class Transition(str, Enum):
    """The five outcomes of a single search step."""
    EXTEND = "extend"
    PROBE = "probe"
    ADVANCE = "advance"
    BACKTRACK = "backtrack"
    DONE = "done"

    @property
    def emitted(self) -> bool:
        return self is Transition.EXTEND


@dataclass(frozen=True)
class Parameters:
    """Universe size n, row weight k and intersection ceiling t."""
    n: int
    k: int
    t: int

    def __post_init__(self) -> None:
        for name in ("n", "k", "t"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameters(f"{name} must be an integer, got {value!r}")
        if not self.n > self.k > self.t >= 1:
            raise InvalidParameters(
                f"need n > k > t >= 1, got n={self.n} k={self.k} t={self.t}")
        if not self.admissible:
            LOG.warning("n=%d k=%d t=%d fails the divisibility conditions; "
                        "B=%d and r=%d are rounded down",
                        self.n, self.k, self.t, self.blocks, self.replication)

    @property
    def num_rows(self) -> int:
        return binomial(self.n, self.k)

    @property
    def blocks(self) -> int:
        """B, the size of a complete solution."""
        return binomial(self.n, self.t) // binomial(self.k, self.t)

    @property
    def replication(self) -> int:
        """r, the number of blocks through any single element."""
        return binomial(self.n - 1, self.t - 1) // binomial(self.k - 1, self.t - 1)

    @property
    def first_bound(self) -> RowIndex:
        # rows below this index contain element 0
        return binomial(self.n - 1, self.k - 1)

    @property
    def second_bound(self) -> RowIndex:
        # rows below this index contain element 0 or element 1
        return self.first_bound + binomial(self.n - 2, self.k - 1)

    @property
    def admissible(self) -> bool:
        """True when C(n-i, t-i) is divisible by C(k-i, t-i) for every i < t."""
        return all(binomial(self.n - i, self.t - i) % binomial(self.k - i, self.t - i) == 0
                   for i in range(self.t))

    def slot_bound(self, slot: int) -> RowIndex | None:
        """Exclusive RowIndex ceiling imposed on a slot by structural pruning."""
        r = self.replication
        if slot < r:
            return self.first_bound
        if slot < 2 * r - 1:
            return self.second_bound
        return None

    def default_prune(self) -> bool:
        return self.admissible and self.t <= 2
