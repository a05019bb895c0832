from . import Sink, register_sink

@register_sink
class CollectSink(Sink):
    name = "collect"

    def __init__(self, store, stream=None):
        super().__init__(store, stream)
        self.solutions = []

    def emit(self, solution):
        self.solutions.append(tuple(solution))
