#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


DEFAULT_LANGUAGE = "en-US"


@dataclass
class Quote:
	"""One converted spreadsheet row."""
	id: int
	text: str
	tags: List[str]
	language: str = DEFAULT_LANGUAGE
	author: Optional[str] = None
	year: Optional[int] = None
	context: Optional[str] = None

	def to_dict(self) -> Dict[str, Any]:
		out: Dict[str, Any] = {"id": self.id, "text": self.text}
		if self.author is not None:
			out["author"] = self.author
		if self.year is not None:
			out["year"] = self.year
		if self.context is not None:
			out["context"] = self.context
		out["tags"] = list(self.tags)
		out["lang"] = self.language
		return out


@dataclass
class Schema:
	format: str = "JSON"
	encoding: str = "UTF-8"
	filetype: str = "text"

	def to_dict(self) -> Dict[str, str]:
		return {"format": self.format, "encoding": self.encoding, "filetype": self.filetype}


@dataclass
class Metadata:
	version: str
	last_updated: str
	total_quotes: int
	url: str
	schema: Schema = field(default_factory=Schema)

	def to_dict(self) -> Dict[str, Any]:
		return {
			"version": self.version,
			"lastUpdated": self.last_updated,
			"totalQuotes": self.total_quotes,
			"url": self.url,
			"schema": self.schema.to_dict(),
		}


@dataclass
class SkippedRow:
	"""A row left out of the output, with the reason it was dropped."""
	index: int
	reason: str


@dataclass
class ConversionResult:
	quotes: List[Quote]
	metadata: Metadata
	skipped: List[SkippedRow] = field(default_factory=list)
	quotes_path: Optional[Path] = None
	metadata_path: Optional[Path] = None


def quotes_document(quotes: List[Quote]) -> Dict[str, Any]:
	return {"quotes": [q.to_dict() for q in quotes]}
