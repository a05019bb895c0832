from . import Sink, register_sink

@register_sink
class IndicesSink(Sink):
    """One line per solution: the row indices separated by spaces."""
    name = "indices"

    def emit(self, solution):
        print(" ".join(str(i) for i in solution), file=self.stream)
