from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel

from .errors import ErrorKind
from .graph import EdgeOrder, WordGraph


class EdgeInfo(BaseModel):
	source: str
	target: str
	weight: int


class GraphSummary(BaseModel):
	token_count: Optional[int] = None
	vertex_count: int
	source_count: int
	edge_count: int
	total_weight: int
	self_loops: int = 0


class GraphFacts(BaseModel):
	adjacency: Dict[str, Dict[str, int]]
	edges: List[EdgeInfo] = []
	summary: GraphSummary


class BuildOutcome(BaseModel):
	ok: bool
	error_kind: Optional[ErrorKind] = None
	message: Optional[str] = None
	path: Optional[str] = None
	dot_path: Optional[str] = None
	image_path: Optional[str] = None
	summary: Optional[GraphSummary] = None


def edge_infos(graph: WordGraph, order: EdgeOrder = "sorted") -> List[EdgeInfo]:
	return [EdgeInfo(source=s, target=t, weight=w) for s, t, w in graph.edges(order)]
