from __future__ import annotations

import logging
import re

from .errors import InputMissingError, InputUnreadableError, InvalidParameterError

logger = logging.getLogger(__name__)

NON_LETTER = re.compile(r"[^A-Za-z]")


def normalize_bytes(data: bytes) -> str:
	# latin-1 maps every byte to exactly one character, so each non-letter
	# byte becomes exactly one space.
	return NON_LETTER.sub(" ", data.decode("latin-1"))


def normalize_text(text: str) -> str:
	return NON_LETTER.sub(" ", text)


def read_normalized(path: str) -> str:
	if not path:
		raise InvalidParameterError("File path cannot be empty.")
	try:
		with open(path, "rb") as fh:
			data = fh.read()
	except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
		raise InputMissingError(f"Cannot open input file: {path}", path=path) from e
	except OSError as e:
		raise InputUnreadableError(f"Failed reading input file: {path}", path=path) from e
	logger.debug("read %d bytes from %s", len(data), path)
	return normalize_bytes(data)
