from __future__ import annotations

from typing import Literal, Optional

ErrorKind = Literal[
	"input-missing",
	"input-unreadable",
	"output-unwritable",
	"invalid-parameter",
	"render-failed",
]


class WordGraphError(Exception):
	"""Base failure raised by the word graph pipeline."""

	kind: ErrorKind = "invalid-parameter"

	def __init__(self, message: str, path: Optional[str] = None):
		super().__init__(message)
		self.message = message
		self.path = path


class InvalidParameterError(WordGraphError):
	kind: ErrorKind = "invalid-parameter"


class InputMissingError(WordGraphError):
	kind: ErrorKind = "input-missing"


class InputUnreadableError(WordGraphError):
	kind: ErrorKind = "input-unreadable"


class OutputUnwritableError(WordGraphError):
	kind: ErrorKind = "output-unwritable"


class RenderError(WordGraphError):
	kind: ErrorKind = "render-failed"
