import os
import stat

import pytest

from wordgraph.builder import build_graph_from_text
from wordgraph.dot import parse_dot, render_dot, write_dot
from wordgraph.errors import OutputUnwritableError
from wordgraph.graph import WordGraph


def test_empty_graph_document():
	assert render_dot(WordGraph()) == "digraph G {\n}\n"


def test_sorted_edge_lines():
	g = build_graph_from_text("to be or not to be")
	assert render_dot(g) == (
		"digraph G {\n"
		'  "be" -> "or" [label="1"];\n'
		'  "not" -> "to" [label="1"];\n'
		'  "or" -> "not" [label="1"];\n'
		'  "to" -> "be" [label="2"];\n'
		"}\n"
	)


def test_insertion_order():
	g = build_graph_from_text("the quick brown fox")
	lines = render_dot(g, order="insertion").splitlines()
	assert lines[1:-1] == [
		'  "the" -> "quick" [label="1"];',
		'  "quick" -> "brown" [label="1"];',
		'  "brown" -> "fox" [label="1"];',
	]


def test_render_is_stable():
	g = build_graph_from_text("a b a c a b")
	assert render_dot(g) == render_dot(g)
	assert render_dot(g, "insertion") == render_dot(g, "insertion")


def test_parse_reads_back_rendered_graph():
	g = build_graph_from_text("to be or not to be, that is the question; to be")
	assert parse_dot(render_dot(g)) == g
	assert parse_dot(render_dot(WordGraph())) == WordGraph()


def test_quotes_are_escaped():
	g = WordGraph.from_dict({'say "hi"': {"back\\slash": 3}})
	text = render_dot(g)
	assert '"say \\"hi\\""' in text
	assert parse_dot(text) == g


def test_parse_rejects_garbage():
	with pytest.raises(ValueError):
		parse_dot("graph {\n}\n")
	with pytest.raises(ValueError):
		parse_dot('digraph G {\n  "a" -> "b";\n}\n')


def test_write_dot(tmp_path):
	g = build_graph_from_text("a a b")
	out = tmp_path / "graph.dot"
	assert write_dot(g, str(out)) == str(out)
	assert out.read_text(encoding="utf-8") == render_dot(g)
	assert [p.name for p in tmp_path.iterdir()] == ["graph.dot"]


def test_write_dot_replaces_existing(tmp_path):
	out = tmp_path / "graph.dot"
	out.write_text("old")
	write_dot(WordGraph(), str(out))
	assert out.read_text() == "digraph G {\n}\n"


def test_write_dot_to_missing_directory(tmp_path):
	target = tmp_path / "missing" / "graph.dot"
	with pytest.raises(OutputUnwritableError) as exc:
		write_dot(WordGraph(), str(target))
	assert exc.value.kind == "output-unwritable"
	assert exc.value.path == str(target)
	assert not os.path.exists(target)


def test_write_dot_keeps_existing_mode(tmp_path):
	out = tmp_path / "graph.dot"
	out.write_text("old")
	os.chmod(out, 0o644)
	write_dot(WordGraph(), str(out))
	assert stat.S_IMODE(os.stat(out).st_mode) == 0o644
	os.chmod(out, 0o640)
	write_dot(build_graph_from_text("a b"), str(out))
	assert stat.S_IMODE(os.stat(out).st_mode) == 0o640


def test_write_dot_new_file_follows_umask(tmp_path):
	out = tmp_path / "graph.dot"
	old = os.umask(0o022)
	try:
		write_dot(WordGraph(), str(out))
	finally:
		os.umask(old)
	assert stat.S_IMODE(os.stat(out).st_mode) == 0o644
