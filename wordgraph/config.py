"""
Pydantic config for a word graph run.

Every field except the input path has a default, so the CLI and the API can
construct a config from whatever subset of options they receive.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .graph import EdgeOrder

DEFAULT_DOT_PATH = "graph.dot"
DEFAULT_IMAGE_PATH = "graph.png"


class GraphConfig(BaseModel):
	# ---- Input / Output ----
	input_path: Optional[str] = None   # resolved against the working directory
	dot_path: str = DEFAULT_DOT_PATH

	# ---- Tokenization ----
	fold_case: bool = True   # False keeps "The" and "the" as separate vertices

	# ---- Presentation ----
	order: EdgeOrder = "sorted"
	print_report: bool = True

	# ---- Layout tool ----
	render_image: bool = False
	image_path: str = DEFAULT_IMAGE_PATH
	image_format: str = "png"
	layout_command: str = "dot"
