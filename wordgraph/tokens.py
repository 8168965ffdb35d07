from __future__ import annotations

from typing import Iterator, List


def iter_tokens(text: str, fold_case: bool = True) -> Iterator[str]:
	"""Yield whitespace-separated tokens of normalized text in input order."""
	for word in text.split():
		yield word.lower() if fold_case else word


def tokenize(text: str, fold_case: bool = True) -> List[str]:
	return list(iter_tokens(text, fold_case=fold_case))
