#!/usr/bin/env python3
"""
Workbook access through a local Excel application using xlwings.
Needs Excel installed (Windows or macOS).
"""

from pathlib import Path
from typing import Any, List, Union

import xlwings as xw
from loguru import logger

from ._cells import row_texts
from .errors import OpenError, RowReadError


SUPPORTED_EXTENSIONS = (".xlsx", ".xlsm", ".xltx", ".xltm", ".xlsb", ".xls")


class XlwingsWorkbook:
	"""Read sheet names and string rows from a workbook opened in Excel."""

	def __init__(self, excel_file_path: Union[str, Path]):
		self.excel_file_path = Path(excel_file_path)
		self.app = None
		self.workbook = None

	def __enter__(self):
		self.open()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close()

	def open(self) -> None:
		path = self.excel_file_path
		if not path.is_file():
			raise OpenError(f"failed to open Excel file {path}: file not found")
		if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
			raise OpenError(f"failed to open Excel file {path}: unsupported file format '{path.suffix}'")
		try:
			self.app = xw.App(visible=False)
			self.workbook = self.app.books.open(str(path))
			logger.info("Successfully opened: {}", path.name)
		except Exception as e:
			self.close()
			raise OpenError(f"failed to open Excel file {path}: {e}") from e

	def close(self) -> None:
		"""Close the workbook and quit the Excel application."""
		try:
			if self.workbook is not None:
				self.workbook.close()
			if self.app is not None:
				self.app.quit()
		except Exception as e:
			logger.warning("Error closing workbook {}: {}", self.excel_file_path.name, e)
		finally:
			self.workbook = None
			self.app = None

	def sheet_names(self) -> List[str]:
		return [s.name for s in self.workbook.sheets]

	def get_rows(self, sheet_name: str) -> List[List[str]]:
		try:
			sheet = self.workbook.sheets[sheet_name]
			# used_range starts at the first used cell; anchor at A1 so indexes match the sheet
			last = sheet.used_range.last_cell
			values = sheet.range((1, 1), (last.row, last.column)).options(ndim=2).value
		except Exception as e:
			raise RowReadError(f"unable to load cells of sheet '{sheet_name}': {e}") from e
		return [row_texts(r) for r in _as_rows(values)]


def _as_rows(values: Any) -> List[List[Any]]:
	# ndim=2 yields a list of rows
	if values is None:
		return []
	if not isinstance(values, list):
		return [[values]]
	return [list(r) for r in values]
