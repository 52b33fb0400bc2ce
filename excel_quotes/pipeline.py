#!/usr/bin/env python3
"""
Conversion pipeline: first sheet of a workbook -> quotes.json + quotesMetadata.json.

The workbook argument of `convert_workbook` is any object exposing
`sheet_names()` and `get_rows(sheet_name)`, such as `OpenpyxlWorkbook` or
`XlwingsWorkbook`.
"""

import platform
from pathlib import Path
from typing import Any, List, Optional, Union

from loguru import logger

from .batching import BatchAccumulator
from .config import ConversionConfig, load_config
from .errors import NoSheetsError, RowReadError
from .metadata import build_metadata
from .models import ConversionResult, SkippedRow, quotes_document
from .normalizer import normalize_row
from .openpyxl_reader import OpenpyxlWorkbook
from .writer import METADATA_INDENT, QUOTES_INDENT, write_json


ENGINES = ("openpyxl", "xlwings")


def default_engine() -> str:
	# Excel automation is only available where Excel runs
	return "xlwings" if platform.system().lower().startswith("win") else "openpyxl"


def open_workbook(path: Union[str, Path], engine: Optional[str] = None):
	"""Return an unopened workbook reader for `path`; use it as a context manager."""
	engine = engine or default_engine()
	if engine == "openpyxl":
		return OpenpyxlWorkbook(path)
	if engine == "xlwings":
		from .xlwings_reader import XlwingsWorkbook
		return XlwingsWorkbook(path)
	raise ValueError(f"unknown engine '{engine}', expected one of {', '.join(ENGINES)}")


def _read_first_sheet(workbook: Any) -> List[List[str]]:
	sheets = workbook.sheet_names()
	if not sheets:
		raise NoSheetsError("no sheets found in the Excel file")
	sheet_name = sheets[0]
	try:
		return workbook.get_rows(sheet_name)
	except RowReadError:
		raise
	except Exception as e:
		raise RowReadError(f"unable to load cells of sheet '{sheet_name}': {e}") from e


def convert_workbook(workbook: Any, config: Optional[ConversionConfig] = None) -> ConversionResult:
	"""
	Convert the first sheet of an open workbook and write both output documents.

	The quotes document is written before the metadata document. If the second
	write fails the first one stays on disk.

	Raises:
		NoSheetsError: the workbook has no sheet
		RowReadError: rows of the first sheet could not be read
		WriteError: either output document could not be written
	"""
	cfg = config or load_config()
	rows = _read_first_sheet(workbook)

	acc = BatchAccumulator(cfg.batch_size)
	skipped: List[SkippedRow] = []
	for index, row in enumerate(rows):
		quote, skip = normalize_row(row, index)
		if skip is not None:
			skipped.append(skip)
			continue
		acc.add(quote)
	quotes = acc.records

	metadata = build_metadata(len(quotes))

	quotes_path = write_json(cfg.quotes_output, quotes_document(quotes), indent=QUOTES_INDENT)
	metadata_path = write_json(cfg.metadata_output, metadata.to_dict(), indent=METADATA_INDENT)

	logger.info(
		"JSON data successfully written to {} and {} ({} quotes, {} rows skipped)",
		quotes_path, metadata_path, len(quotes), len(skipped),
	)
	return ConversionResult(
		quotes=quotes,
		metadata=metadata,
		skipped=skipped,
		quotes_path=quotes_path,
		metadata_path=metadata_path,
	)


def read_quotes_from_excel(
	path: Optional[Union[str, Path]] = None,
	config: Optional[ConversionConfig] = None,
	engine: Optional[str] = None,
) -> ConversionResult:
	"""
	Open the workbook at `path` (defaults to the configured source), convert it,
	and release the workbook on every exit path.

	Raises:
		OpenError: the path is missing, unreadable or not a supported workbook
		plus everything `convert_workbook` raises
	"""
	cfg = config or load_config()
	source = Path(path) if path is not None else cfg.source
	with open_workbook(source, engine) as workbook:
		return convert_workbook(workbook, cfg)
