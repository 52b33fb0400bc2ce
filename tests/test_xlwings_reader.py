import pytest

pytest.importorskip("xlwings")

from excel_quotes import xlwings_reader
from excel_quotes.errors import OpenError, RowReadError
from excel_quotes.xlwings_reader import XlwingsWorkbook


class FakeCell:
	def __init__(self, row, column):
		self.row = row
		self.column = column


class FakeRange:
	def __init__(self, value, last_cell=None):
		self.value = value
		self.last_cell = last_cell

	def options(self, ndim=None):
		return self


class FakeSheet:
	"""Cells keyed by 1-based (row, column); used_range covers only the populated block, like Excel."""

	def __init__(self, name, rows, first_row=1, first_column=1):
		self.name = name
		self.cells = {}
		for r, row in enumerate(rows or [], start=first_row):
			for c, value in enumerate(row, start=first_column):
				if value is not None:
					self.cells[(r, c)] = value

	@property
	def used_range(self):
		if not self.cells:
			return FakeRange([[None]], FakeCell(1, 1))
		top = min(r for r, _ in self.cells)
		left = min(c for _, c in self.cells)
		bottom = max(r for r, _ in self.cells)
		right = max(c for _, c in self.cells)
		return FakeRange(self._block(top, left, bottom, right), FakeCell(bottom, right))

	def range(self, first, last):
		return FakeRange(self._block(first[0], first[1], last[0], last[1]))

	def _block(self, top, left, bottom, right):
		return [[self.cells.get((r, c)) for c in range(left, right + 1)] for r in range(top, bottom + 1)]


class FakeSheets:
	def __init__(self, sheets):
		self._sheets = sheets

	def __iter__(self):
		return iter(self._sheets)

	def __getitem__(self, name):
		for s in self._sheets:
			if s.name == name:
				return s
		raise KeyError(name)


class FakeBook:
	def __init__(self, sheets):
		self.sheets = FakeSheets(sheets)
		self.closed = False

	def close(self):
		self.closed = True


class FakeApp:
	book = None

	def __init__(self, visible=True):
		self.books = self
		self.quit_called = False

	def open(self, path):
		return FakeApp.book

	def quit(self):
		self.quit_called = True


@pytest.fixture
def fake_excel(monkeypatch):
	class FakeXw:
		App = FakeApp

	monkeypatch.setattr(xlwings_reader, "xw", FakeXw)
	FakeApp.book = FakeBook([
		FakeSheet("Quotes", [["Tags", "Quote"], ["a, b", "Test quote 1"], [None, "Test quote 2"], [1.0, None]]),
		FakeSheet("Later", None),
	])
	return FakeApp.book


def test_reads_rows_through_excel(tmp_path, fake_excel):
	path = tmp_path / "book.xlsx"
	path.write_bytes(b"")
	with XlwingsWorkbook(path) as book:
		assert book.sheet_names() == ["Quotes", "Later"]
		assert book.get_rows("Quotes") == [["Tags", "Quote"], ["a, b", "Test quote 1"], ["", "Test quote 2"], ["1"]]
		assert book.get_rows("Later") == [[]]
		app = book.app
	assert fake_excel.closed
	assert app.quit_called


def test_missing_sheet_is_row_read_error(tmp_path, fake_excel):
	path = tmp_path / "book.xlsx"
	path.write_bytes(b"")
	with XlwingsWorkbook(path) as book:
		with pytest.raises(RowReadError):
			book.get_rows("Nope")


def test_open_errors(tmp_path, fake_excel):
	with pytest.raises(OpenError):
		XlwingsWorkbook(tmp_path / "nonexistent.xlsx").open()
	txt = tmp_path / "test.txt"
	txt.write_text("x", encoding="utf-8")
	with pytest.raises(OpenError):
		XlwingsWorkbook(txt).open()


def test_blank_tag_column_keeps_cell_positions(tmp_path, fake_excel):
	fake_excel.sheets = FakeSheets([
		FakeSheet("Quotes", [["Quote"], ["q1"], ["q2"]], first_column=2),
	])
	path = tmp_path / "book.xlsx"
	path.write_bytes(b"")
	with XlwingsWorkbook(path) as book:
		assert book.get_rows("Quotes") == [["", "Quote"], ["", "q1"], ["", "q2"]]


def test_blank_rows_above_header_are_kept(tmp_path, fake_excel):
	fake_excel.sheets = FakeSheets([
		FakeSheet("Quotes", [["Tags", "Quote"], ["a", "q1"]], first_row=3),
	])
	path = tmp_path / "book.xlsx"
	path.write_bytes(b"")
	with XlwingsWorkbook(path) as book:
		assert book.get_rows("Quotes") == [[], [], ["Tags", "Quote"], ["a", "q1"]]