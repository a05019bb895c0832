"""Command-line driver for the block search."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from itertools import islice
from pathlib import Path

from ..core.model import SteinerError
from ..core.parallel import parallel_search
from ..core.rows import RowStore
from ..core.search import SearchController
from ..sinks import SINK_REGISTRY, make_sink
from . import parser

LOG = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="steiner-search",
        description="Enumerate every set of B k-subsets of an n-set that pairwise "
                    "share fewer than t elements")
    ap.add_argument("config", nargs="?", help="Path to a YAML run file")
    ap.add_argument("-n", type=int, help="Universe size")
    ap.add_argument("-k", type=int, help="Row weight")
    ap.add_argument("-t", type=int, help="Intersection ceiling")
    ap.add_argument("--prune", action=argparse.BooleanOptionalAction, default=None,
                    help="Structural pruning (default: on where it is known exact)")
    ap.add_argument("--workers", type=int, help="Processes for the partitioned search")
    ap.add_argument("--limit", type=int, help="Stop after this many solutions")
    ap.add_argument("--output", choices=sorted(SINK_REGISTRY), help="How to report solutions")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap


def resolve_config(args: argparse.Namespace) -> parser.RunConfig:
    if args.config:
        data = vars(parser.load_config(Path(args.config)))
    else:
        data = {}
    overrides = {
        "n": args.n, "k": args.k, "t": args.t, "prune": args.prune,
        "workers": args.workers, "limit": args.limit, "output": args.output,
    }
    data.update({key: value for key, value in overrides.items() if value is not None})
    return parser.config_from_mapping(data)


def run(config: parser.RunConfig, stream=None) -> int:
    """Run the search described by ``config``; return the number of solutions."""
    params = config.parameters()
    store = RowStore.build(params.n, params.k)
    sink = make_sink(config.output, store, stream if stream is not None else sys.stdout)
    LOG.info("n=%d k=%d t=%d: %d candidate rows, B=%d, r=%d",
             params.n, params.k, params.t, params.num_rows,
             params.blocks, params.replication)
    t0 = time.time()
    if config.workers > 1:
        solutions = parallel_search(params, prune=config.prune, workers=config.workers)
        try:
            for solution in islice(solutions, config.limit):
                sink(solution)
        finally:
            solutions.close()
    else:
        controller = SearchController(params, store, prune=config.prune, sink=sink)
        for _ in controller.run(config.limit):
            pass
    sink.close()
    LOG.info("%d solutions in %.2fs", sink.count, time.time() - t0)
    return sink.count


def main(argv: list[str] | None = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING - 10 * min(args.verbose, 2),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = resolve_config(args)
        run(config)
    except SteinerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
