from __future__ import annotations

import logging
import subprocess
from typing import List

from .errors import RenderError

logger = logging.getLogger(__name__)


def layout_args(dot_path: str, image_path: str, fmt: str = "png", command: str = "dot") -> List[str]:
	return [command, f"-T{fmt}", dot_path, "-o", image_path]


def render_image(dot_path: str, image_path: str, fmt: str = "png", command: str = "dot") -> str:
	"""Run the external layout tool on a DOT file and return the image path."""
	args = layout_args(dot_path, image_path, fmt, command)
	logger.info("running %s", " ".join(args))
	try:
		proc = subprocess.run(args, capture_output=True, text=True, check=False)
	except OSError as e:
		raise RenderError(f"Layout tool not available: {command}", path=image_path) from e
	if proc.returncode != 0:
		detail = (proc.stderr or "").strip()
		raise RenderError(
			f"Layout tool failed ({proc.returncode}) writing {image_path}: {detail}", path=image_path
		)
	return image_path
