from fastapi.testclient import TestClient

from api import app

client = TestClient(app)


def test_graph_from_text():
	resp = client.post("/graph", json={"text": "to be or not to be"})
	assert resp.status_code == 200
	body = resp.json()
	assert body["facts"]["adjacency"]["to"] == {"be": 2}
	assert body["facts"]["summary"]["total_weight"] == 5
	assert body["facts"]["edges"][0] == {"source": "be", "target": "or", "weight": 1}
	assert body["dot"].startswith("digraph G {\n")


def test_graph_from_file(tmp_path):
	src = tmp_path / "in.txt"
	src.write_text("a a a")
	resp = client.post("/graph", json={"input_path": str(src)})
	assert resp.status_code == 200
	assert resp.json()["facts"]["adjacency"] == {"a": {"a": 2}}


def test_graph_requires_input():
	assert client.post("/graph", json={}).status_code == 400


def test_graph_missing_file(tmp_path):
	resp = client.post("/graph", json={"input_path": str(tmp_path / "nope.txt")})
	assert resp.status_code == 404


def test_build_endpoint(tmp_path):
	src = tmp_path / "in.txt"
	src.write_text("one two")
	dot = tmp_path / "graph.dot"
	resp = client.post("/build", json={"input_path": str(src), "dot_path": str(dot)})
	assert resp.status_code == 200
	assert resp.json()["ok"] is True
	assert dot.read_text() == 'digraph G {\n  "one" -> "two" [label="1"];\n}\n'


def test_build_endpoint_unwritable(tmp_path):
	src = tmp_path / "in.txt"
	src.write_text("one two")
	resp = client.post("/build", json={"input_path": str(src), "dot_path": str(tmp_path / "x" / "g.dot")})
	assert resp.status_code == 500
