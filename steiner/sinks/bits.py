"""Bit-string rendering: one line per row, element 0 leftmost."""

from __future__ import annotations

from . import Sink, register_sink


def format_row(row: int, n: int) -> str:
    return "".join("1" if row >> j & 1 else "0" for j in range(n))


def format_solution(store, solution) -> str:
    return "\n".join(format_row(store.row(i), store.n) for i in solution)


@register_sink
class BitsSink(Sink):
    name = "bits"

    def emit(self, solution):
        if self.count > 1:
            print(file=self.stream)
        print(format_solution(self.store, solution), file=self.stream)
