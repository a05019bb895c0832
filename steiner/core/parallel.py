"""Partitioned search over a process pool.

Solutions are disjoint across partitions of the first chosen row, so each
worker runs its own controller on one slice and the results only need to be
concatenated in slice order to reproduce the serial stream.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from multiprocessing import get_context
from typing import Iterator, List, Optional

from .model import Parameters, Solution
from .search import SearchController

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartitionTask:
    n: int
    k: int
    t: int
    prune: bool
    lo: int
    hi: int


@dataclass
class PartitionResult:
    task: PartitionTask
    solutions: List[Solution] = field(default_factory=list)
    steps: int = 0
    elapsed_sec: float = 0.0


def partition_tasks(params: Parameters, prune: bool, chunks: int) -> List[PartitionTask]:
    """Split the first-row range into at most ``chunks`` contiguous slices."""
    if chunks < 1:
        raise ValueError("chunks must be at least 1")
    # with pruning, slot 0 can only hold rows containing element 0
    stop = params.first_bound if prune else params.num_rows
    chunks = min(chunks, stop)
    tasks = []
    lo = 0
    for i in range(chunks):
        hi = stop * (i + 1) // chunks
        tasks.append(PartitionTask(params.n, params.k, params.t, prune, lo, hi))
        lo = hi
    return tasks


def run_partition(task: PartitionTask) -> PartitionResult:
    t0 = time.time()
    params = Parameters(task.n, task.k, task.t)
    controller = SearchController(params, prune=task.prune,
                                  first_rows=range(task.lo, task.hi))
    result = PartitionResult(task=task)
    result.solutions.extend(controller.run())
    result.steps = controller.steps
    result.elapsed_sec = time.time() - t0
    return result


def parallel_search(
    params: Parameters,
    prune: Optional[bool] = None,
    workers: int = 2,
    chunks: Optional[int] = None,
) -> Iterator[Solution]:
    """Yield every solution in serial order, computing slices in ``workers`` processes."""
    if prune is None:
        prune = params.default_prune()
    tasks = partition_tasks(params, prune, chunks or params.first_bound)
    LOG.info("searching n=%d k=%d t=%d in %d slices on %d workers",
             params.n, params.k, params.t, len(tasks), workers)
    ctx = get_context("spawn")
    total_steps = 0
    with ctx.Pool(processes=workers) as pool:
        for res in pool.imap(run_partition, tasks, chunksize=1):
            LOG.debug("rows %d..%d: %d solutions, %d steps, %.2fs",
                      res.task.lo, res.task.hi, len(res.solutions),
                      res.steps, res.elapsed_sec)
            total_steps += res.steps
            yield from res.solutions
    LOG.info("parallel search finished after %d steps", total_steps)
