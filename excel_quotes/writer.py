#!/usr/bin/env python3
import json
from pathlib import Path
from typing import Any, Union

from .errors import WriteError


QUOTES_INDENT = 2
METADATA_INDENT = 1


def dump_json(payload: Any, indent: int) -> str:
	return json.dumps(payload, ensure_ascii=False, indent=indent)


def write_json(path: Union[str, Path], payload: Any, indent: int = QUOTES_INDENT) -> Path:
	"""Serialize `payload` fully, then write it to `path` in a single call."""
	path = Path(path)
	text = dump_json(payload, indent)
	try:
		with path.open("w", encoding="utf-8") as f:
			f.write(text)
	except OSError as e:
		raise WriteError(path, f"error writing JSON to file {path}: {e}") from e
	return path
