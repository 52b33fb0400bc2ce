from pathlib import Path

import pytest
from openpyxl import Workbook

from excel_quotes import ConversionConfig


SAMPLE_ROWS = [
	["Tags", "Quote"],
	["inspiration,motivation", "Test quote 1"],
	["", "Test quote 2"],
	["wisdom, life, philosophy", "Test quote 3"],
]


def save_workbook(path: Path, rows, sheet_title: str = "Sheet1") -> Path:
	wb = Workbook()
	ws = wb.active
	ws.title = sheet_title
	for r, row in enumerate(rows, start=1):
		for c, value in enumerate(row, start=1):
			ws.cell(row=r, column=c, value=value)
	wb.save(path)
	wb.close()
	return path


class FakeWorkbook:
	"""In-memory stand-in for a workbook reader."""

	def __init__(self, sheets=None, rows=None, rows_error=None, close_error=None):
		self.sheets = ["Sheet1"] if sheets is None else sheets
		self.rows = rows or []
		self.rows_error = rows_error
		self.close_error = close_error
		self.requested = []
		self.closed = False

	def sheet_names(self):
		return list(self.sheets)

	def get_rows(self, sheet_name):
		self.requested.append(sheet_name)
		if self.rows_error is not None:
			raise self.rows_error
		return self.rows


@pytest.fixture
def sample_xlsx(tmp_path) -> Path:
	return save_workbook(tmp_path / "test.xlsx", SAMPLE_ROWS)


@pytest.fixture
def out_config(tmp_path) -> ConversionConfig:
	out = tmp_path / "out"
	out.mkdir()
	return ConversionConfig(
		source=tmp_path / "test.xlsx",
		quotes_output=out / "quotes.json",
		metadata_output=out / "quotesMetadata.json",
	)
