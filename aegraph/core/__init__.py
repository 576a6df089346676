from .graph import Graph, EMPTY_SHEET, EMPTY_CUT  # noqa: F401
from .graph_parser import parse_graph, render_graph  # noqa: F401
from .canon import canonicalize  # noqa: F401
from .address import Address, Step, StepKind  # noqa: F401
