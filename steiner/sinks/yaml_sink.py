from __future__ import annotations

import yaml

from ..core.combinations import row_elements
from . import Sink, register_sink


@register_sink
class YamlSink(Sink):
    """Streams solutions as a YAML sequence of block lists."""
    name = "yaml"

    def emit(self, solution):
        doc = {
            "solution": self.count,
            "rows": list(solution),
            "blocks": [list(row_elements(self.store.row(i))) for i in solution],
        }
        self.stream.write(yaml.safe_dump([doc], default_flow_style=None, sort_keys=False))
