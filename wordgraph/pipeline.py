from __future__ import annotations

import logging
import os
from typing import List, Optional, TextIO, Tuple

from .builder import build_graph
from .config import DEFAULT_DOT_PATH, GraphConfig
from .dot import write_dot
from .errors import InvalidParameterError, WordGraphError
from .graph import WordGraph
from .model import BuildOutcome
from .normalize import read_normalized
from .render import render_image
from .report import print_adjacency, summarize_graph
from .tokens import tokenize

logger = logging.getLogger(__name__)


def resolve_input(input_path: Optional[str]) -> str:
	if input_path is None or not input_path.strip():
		raise InvalidParameterError("File path cannot be empty.")
	return os.path.join(os.getcwd(), input_path)


def load_tokens(input_path: Optional[str], fold_case: bool = True) -> List[str]:
	path = resolve_input(input_path)
	return tokenize(read_normalized(path), fold_case=fold_case)


def load_graph(input_path: Optional[str], fold_case: bool = True) -> Tuple[WordGraph, int]:
	"""Read, normalize and tokenize a file, returning its graph and token count."""
	tokens = load_tokens(input_path, fold_case=fold_case)
	return build_graph(tokens), len(tokens)


def run_pipeline(config: GraphConfig, stream: Optional[TextIO] = None) -> BuildOutcome:
	"""Run one ingestion; typed errors propagate to the caller."""
	path = resolve_input(config.input_path)
	tokens = tokenize(read_normalized(path), fold_case=config.fold_case)
	graph = build_graph(tokens)
	summary = summarize_graph(graph, token_count=len(tokens))
	logger.info(
		"loaded %s",
		path,
		extra={"fields": summary.model_dump()},
	)

	if config.print_report:
		print_adjacency(graph, stream, order=config.order)

	write_dot(graph, config.dot_path, order=config.order)

	image_path = None
	if config.render_image:
		image_path = render_image(
			config.dot_path,
			config.image_path,
			fmt=config.image_format,
			command=config.layout_command,
		)

	return BuildOutcome(
		ok=True,
		path=path,
		dot_path=config.dot_path,
		image_path=image_path,
		summary=summary,
	)


def build_and_emit(
	input_path: Optional[str],
	dot_path: str = DEFAULT_DOT_PATH,
	fold_case: bool = True,
	print_report: bool = True,
	stream: Optional[TextIO] = None,
) -> BuildOutcome:
	"""Single entry point for front-ends: ok, or the kind of failure."""
	config = GraphConfig(
		input_path=input_path,
		dot_path=dot_path,
		fold_case=fold_case,
		print_report=print_report,
	)
	try:
		return run_pipeline(config, stream)
	except WordGraphError as e:
		logger.warning("%s: %s", e.kind, e.message)
		return BuildOutcome(ok=False, error_kind=e.kind, message=e.message, path=e.path)
