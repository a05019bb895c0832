"""Solution sink registry and base class."""

from __future__ import annotations

import sys
from typing import IO, Dict, Type

from ..core.model import ConfigError, Solution
from ..core.rows import RowStore


class Sink:
    """Base sink: receives each completed solution exactly once."""
    name: str = "sink"

    def __init__(self, store: RowStore, stream: IO[str] | None = None) -> None:
        self.store = store
        self.stream = stream if stream is not None else sys.stdout
        self.count = 0

    def __call__(self, solution: Solution) -> None:
        self.count += 1
        self.emit(solution)

    def emit(self, solution: Solution) -> None:  # pragma: no cover - overridden
        pass

    def close(self) -> None:
        pass


SINK_REGISTRY: Dict[str, Type[Sink]] = {}


def register_sink(cls: Type[Sink]) -> Type[Sink]:
    SINK_REGISTRY[cls.name] = cls
    return cls


def make_sink(name: str, store: RowStore, stream: IO[str] | None = None) -> Sink:
    try:
        cls = SINK_REGISTRY[name]
    except KeyError:
        raise ConfigError(f"unknown output {name!r}; choose from "
                          f"{', '.join(sorted(SINK_REGISTRY))}") from None
    return cls(store, stream)


from . import bits, collect, count, indices, yaml_sink  # noqa: E402,F401
