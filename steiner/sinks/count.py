from . import Sink, register_sink

@register_sink
class CountSink(Sink):
    """Counts solutions; prints only the total when closed."""
    name = "count"

    def close(self):
        print(self.count, file=self.stream)
