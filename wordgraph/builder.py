from __future__ import annotations

import logging
from typing import Iterable

from .graph import WordGraph
from .normalize import normalize_text
from .tokens import iter_tokens

logger = logging.getLogger(__name__)


def build_graph(tokens: Iterable[str]) -> WordGraph:
	"""Count every adjacent pair (t[i], t[i+1]) as one unit of edge weight."""
	graph = WordGraph()
	previous = None
	seen = 0
	for token in tokens:
		if previous is not None:
			graph.add_edge(previous, token)
		previous = token
		seen += 1
	logger.debug("built graph from %d tokens: %r", seen, graph)
	return graph


def build_graph_from_text(text: str, fold_case: bool = True) -> WordGraph:
	return build_graph(iter_tokens(normalize_text(text), fold_case=fold_case))
