from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


def _utc_now_iso_z() -> str:
	return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


class JsonFormatter(logging.Formatter):
	def format(self, record: logging.LogRecord) -> str:
		base: dict[str, Any] = {
			"ts": _utc_now_iso_z(),
			"level": record.levelname,
			"logger": record.name,
			"msg": record.getMessage(),
		}
		if record.exc_info:
			base["exc"] = self.formatException(record.exc_info)

		# Optional extras via logger.*(..., extra={"fields": {...}})
		fields = getattr(record, "fields", None)
		if isinstance(fields, dict):
			for k, v in fields.items():
				if k not in base:
					base[k] = v
		return json.dumps(base, ensure_ascii=False)


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> logging.Logger:
	"""Send wordgraph logs to stderr; stdout carries the adjacency listing."""
	handler = logging.StreamHandler(sys.stderr)
	if json_logs:
		handler.setFormatter(JsonFormatter())
	else:
		handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

	lg = logging.getLogger("wordgraph")
	for old in list(lg.handlers):
		lg.removeHandler(old)
	lg.addHandler(handler)
	lg.setLevel(level.upper())
	lg.propagate = False
	return lg
