import json
import logging

from wordgraph.logging_utils import JsonFormatter


def test_json_formatter_includes_fields():
	record = logging.LogRecord("wordgraph.pipeline", logging.INFO, __file__, 1, "loaded %s", ("in.txt",), None)
	record.fields = {"edge_count": 3, "msg": "ignored"}
	out = json.loads(JsonFormatter().format(record))
	assert out["level"] == "INFO"
	assert out["logger"] == "wordgraph.pipeline"
	assert out["msg"] == "loaded in.txt"
	assert out["edge_count"] == 3
	assert out["ts"].endswith("Z")
