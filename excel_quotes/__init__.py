from .config import ConversionConfig, load_config
from .errors import NoSheetsError, OpenError, QuoteConversionError, RowReadError, WriteError
from .models import ConversionResult, Metadata, Quote, SkippedRow
from .openpyxl_reader import OpenpyxlWorkbook
from .pipeline import convert_workbook, open_workbook, read_quotes_from_excel

__all__ = [
	"ConversionConfig",
	"ConversionResult",
	"Metadata",
	"NoSheetsError",
	"OpenError",
	"OpenpyxlWorkbook",
	"Quote",
	"QuoteConversionError",
	"RowReadError",
	"SkippedRow",
	"WriteError",
	"convert_workbook",
	"load_config",
	"open_workbook",
	"read_quotes_from_excel",
]

__version__ = "0.1.0"
