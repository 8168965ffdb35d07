"""Word adjacency graphs built from plain-text documents.

Modules:
- normalize.py: Replace every non-letter byte with a space.
- tokens.py: Split normalized text into lowercase word tokens.
- graph.py: Weighted directed graph container.
- builder.py: Count adjacent token pairs into a graph.
- dot.py: Emit and read back the graph-description document.
- report.py: Console adjacency listing and summaries.
- pipeline.py: File in, listing and DOT file out.
- render.py: Run the external layout tool.
"""

from .builder import build_graph, build_graph_from_text
from .graph import WordGraph
from .pipeline import build_and_emit

__all__ = [
	"WordGraph",
	"build_graph",
	"build_graph_from_text",
	"build_and_emit",
]
