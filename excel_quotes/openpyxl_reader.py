#!/usr/bin/env python3
"""
OpenPyXL-backed workbook access for the quotes converter.
Works on every platform without a local Excel install.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union
from zipfile import BadZipFile

from loguru import logger
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook.workbook import Workbook

from ._cells import row_texts
from .errors import OpenError, RowReadError


SUPPORTED_EXTENSIONS = (".xlsx", ".xlsm", ".xltx", ".xltm")


class OpenpyxlWorkbook:
	"""Read sheet names and string rows from a workbook using openpyxl."""

	def __init__(self, excel_file_path: Union[str, Path]):
		self.excel_file_path = Path(excel_file_path)
		self.workbook: Optional[Workbook] = None

	def __enter__(self):
		self.open()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close()

	def open(self) -> None:
		path = self.excel_file_path
		if not path.exists():
			raise OpenError(f"failed to open Excel file {path}: file not found")
		if not path.is_file():
			raise OpenError(f"failed to open Excel file {path}: not a regular file")
		if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
			raise OpenError(f"failed to open Excel file {path}: unsupported file format '{path.suffix}'")
		try:
			# data_only=True so formula cells yield their cached results
			self.workbook = load_workbook(filename=str(path), data_only=True, read_only=False)
		except (InvalidFileException, BadZipFile, KeyError, OSError) as e:
			raise OpenError(f"failed to open Excel file {path}: {e}") from e

	def close(self) -> None:
		try:
			if self.workbook is not None:
				self.workbook.close()
		except Exception as e:
			logger.warning("Error closing workbook {}: {}", self.excel_file_path.name, e)
		finally:
			self.workbook = None

	def sheet_names(self) -> List[str]:
		return list(self.workbook.sheetnames)

	def get_rows(self, sheet_name: str) -> List[List[str]]:
		try:
			ws = self.workbook[sheet_name]
			return [row_texts(values) for values in ws.iter_rows(values_only=True)]
		except Exception as e:
			raise RowReadError(f"unable to load cells of sheet '{sheet_name}': {e}") from e
