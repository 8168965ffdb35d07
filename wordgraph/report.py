from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .graph import EdgeOrder, WordGraph
from .model import GraphSummary


def format_adjacency(graph: WordGraph, order: EdgeOrder = "sorted") -> List[str]:
	lines: List[str] = []
	for source in graph.sources(order):
		targets = " ".join(f"{target}({count})" for target, count in graph.successors(source, order))
		lines.append(f"{source} -> {targets}")
	return lines


def print_adjacency(graph: WordGraph, stream: Optional[TextIO] = None, order: EdgeOrder = "sorted") -> None:
	out = stream if stream is not None else sys.stdout
	for line in format_adjacency(graph, order):
		out.write(line + "\n")


def summarize_graph(graph: WordGraph, token_count: Optional[int] = None) -> GraphSummary:
	return GraphSummary(
		token_count=token_count,
		vertex_count=len(graph.vertices()),
		source_count=len(graph.adjacency),
		edge_count=graph.edge_count,
		total_weight=graph.total_weight,
		self_loops=len(graph.self_loops()),
	)
