#!/usr/bin/env python3
from datetime import date, datetime, time
from typing import Any, Iterable, List


def cell_text(value: Any) -> str:
	if value is None:
		return ""
	if isinstance(value, bool):
		return "TRUE" if value else "FALSE"
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	if isinstance(value, (datetime, date, time)):
		return value.isoformat()
	return str(value)


def row_texts(values: Iterable[Any]) -> List[str]:
	"""Render a row as strings and drop trailing empty cells."""
	cells = [cell_text(v) for v in values]
	while cells and cells[-1] == "":
		cells.pop()
	return cells
