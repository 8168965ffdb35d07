from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from wordgraph.builder import build_graph
from wordgraph.config import DEFAULT_DOT_PATH
from wordgraph.dot import render_dot
from wordgraph.errors import WordGraphError
from wordgraph.graph import EdgeOrder
from wordgraph.model import BuildOutcome, GraphFacts, edge_infos
from wordgraph.normalize import normalize_text
from wordgraph.pipeline import build_and_emit, load_tokens
from wordgraph.report import summarize_graph
from wordgraph.tokens import tokenize


app = FastAPI(title="Word Graph Builder")

STATUS_BY_KIND = {
	"invalid-parameter": 400,
	"input-missing": 404,
}


class GraphRequest(BaseModel):
	text: Optional[str] = None
	input_path: Optional[str] = None
	fold_case: bool = True
	order: EdgeOrder = "sorted"


class GraphResponse(BaseModel):
	facts: GraphFacts
	dot: str


class BuildRequest(BaseModel):
	input_path: str
	dot_path: str = DEFAULT_DOT_PATH
	fold_case: bool = True


@app.post("/graph", response_model=GraphResponse)
def graph(req: GraphRequest) -> GraphResponse:
	if req.text is not None:
		tokens = tokenize(normalize_text(req.text), fold_case=req.fold_case)
	else:
		try:
			tokens = load_tokens(req.input_path, fold_case=req.fold_case)
		except WordGraphError as e:
			raise HTTPException(status_code=STATUS_BY_KIND.get(e.kind, 500), detail=e.message)

	g = build_graph(tokens)
	facts = GraphFacts(
		adjacency=g.as_dict(),
		edges=edge_infos(g, req.order),
		summary=summarize_graph(g, token_count=len(tokens)),
	)
	return GraphResponse(facts=facts, dot=render_dot(g, req.order))


@app.post("/build", response_model=BuildOutcome)
def build(req: BuildRequest) -> BuildOutcome:
	outcome = build_and_emit(req.input_path, req.dot_path, fold_case=req.fold_case, print_report=False)
	if not outcome.ok:
		raise HTTPException(
			status_code=STATUS_BY_KIND.get(outcome.error_kind, 500),
			detail=outcome.message,
		)
	return outcome


def create_app() -> FastAPI:
	return app
