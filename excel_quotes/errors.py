#!/usr/bin/env python3
"""Exceptions raised while converting a quotes workbook."""


class QuoteConversionError(Exception):
	"""Base class for every failure surfaced by the converter."""


class OpenError(QuoteConversionError):
	"""Workbook path is missing, unreadable, or not a supported workbook format."""


class NoSheetsError(QuoteConversionError):
	"""Workbook does not contain any sheet."""


class RowReadError(QuoteConversionError):
	"""Rows of the selected sheet could not be extracted."""


class WriteError(QuoteConversionError):
	"""An output document could not be written. The I/O error is kept as __cause__."""

	def __init__(self, path, message: str):
		super().__init__(message)
		self.path = path
