from __future__ import annotations

import logging
import os
import re
import stat
import tempfile
from typing import List

from .errors import InvalidParameterError, OutputUnwritableError
from .graph import EdgeOrder, WordGraph

logger = logging.getLogger(__name__)

HEADER = "digraph G {"
FOOTER = "}"

EDGE_LINE = re.compile(
	r'^\s*"((?:[^"\\]|\\.)*)"\s*->\s*"((?:[^"\\]|\\.)*)"\s*\[label="(\d+)"\];\s*$'
)


def _quote(token: str) -> str:
	# Letters-only tokens pass through; escaping keeps other policies parseable.
	escaped = token.replace("\\", "\\\\").replace('"', '\\"')
	return f'"{escaped}"'


def _unquote(token: str) -> str:
	return re.sub(r"\\(.)", r"\1", token)


def format_edge(source: str, target: str, count: int) -> str:
	return f'  {_quote(source)} -> {_quote(target)} [label="{count}"];'


def render_dot(graph: WordGraph, order: EdgeOrder = "sorted") -> str:
	lines: List[str] = [HEADER]
	for source, target, count in graph.edges(order):
		lines.append(format_edge(source, target, count))
	lines.append(FOOTER)
	return "\n".join(lines) + "\n"


def _publish_mode(path: str) -> int:
	# Keep an existing document's mode; new files get the usual umask default.
	try:
		return stat.S_IMODE(os.stat(path).st_mode)
	except FileNotFoundError:
		umask = os.umask(0)
		os.umask(umask)
		return 0o666 & ~umask


def write_dot(graph: WordGraph, path: str, order: EdgeOrder = "sorted") -> str:
	"""Write the DOT document to path, replacing it only once fully written."""
	if not path:
		raise InvalidParameterError("Output path cannot be empty.")
	text = render_dot(graph, order)
	directory = os.path.dirname(os.path.abspath(path))
	tmp_path = None
	try:
		fd, tmp_path = tempfile.mkstemp(prefix=".wordgraph-", suffix=".dot", dir=directory)
		with os.fdopen(fd, "w", encoding="utf-8") as fh:
			fh.write(text)
		os.chmod(tmp_path, _publish_mode(path))
		os.replace(tmp_path, path)
	except OSError as e:
		if tmp_path and os.path.exists(tmp_path):
			os.unlink(tmp_path)
		raise OutputUnwritableError(f"Cannot write graph file: {path}", path=path) from e
	logger.info("wrote %d edges to %s", graph.edge_count, path)
	return path


def parse_dot(text: str) -> WordGraph:
	"""Read back a document produced by render_dot."""
	lines = [line for line in text.splitlines() if line.strip()]
	if not lines or lines[0].strip() != HEADER:
		raise ValueError("Missing 'digraph G {' header")
	if lines[-1].strip() != FOOTER:
		raise ValueError("Missing closing '}'")
	graph = WordGraph()
	for lineno, line in enumerate(lines[1:-1], start=2):
		match = EDGE_LINE.match(line)
		if not match:
			raise ValueError(f"Malformed edge line {lineno}: {line!r}")
		source, target, count = match.groups()
		graph.add_edge(_unquote(source), _unquote(target), int(count))
	return graph
