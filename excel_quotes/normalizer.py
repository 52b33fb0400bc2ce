#!/usr/bin/env python3
"""
Row normalization: turns one raw sheet row into a Quote, or explains why the
row was left out.

Row 0 is always the header. Any other row needs at least two cells:
cell 0 holds comma separated tags, cell 1 holds the quote text.
"""

from typing import List, Optional, Sequence, Tuple

from loguru import logger

from .models import DEFAULT_LANGUAGE, Quote, SkippedRow


HEADER_INDEX = 0
MIN_COLUMNS = 2

SKIP_HEADER = "header"
SKIP_INSUFFICIENT_COLUMNS = "insufficient columns"


def split_tags(raw: str) -> List[str]:
	# Only plain spaces are removed; an empty cell still yields [""].
	return raw.replace(" ", "").split(",")


def normalize_row(row: Sequence[str], index: int) -> Tuple[Optional[Quote], Optional[SkippedRow]]:
	"""
	Normalize a single row.

	Args:
		row: cell values of the row, already rendered as strings
		index: zero-based position of the row in the sheet, header included

	Returns:
		(quote, None) for a kept row, (None, skipped) otherwise
	"""
	if index == HEADER_INDEX:
		logger.info("Skipping row {}: header", index)
		return None, SkippedRow(index=index, reason=SKIP_HEADER)
	if len(row) < MIN_COLUMNS:
		logger.info("Skipping row {}: {} column(s), need {}", index, len(row), MIN_COLUMNS)
		return None, SkippedRow(index=index, reason=SKIP_INSUFFICIENT_COLUMNS)

	quote = Quote(
		id=index,
		text=row[1],
		tags=split_tags(row[0]),
		language=DEFAULT_LANGUAGE,
	)
	return quote, None
