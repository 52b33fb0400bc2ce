#!/usr/bin/env python3
"""
Command-line interface for the excel_quotes package.
Usage:
  python -m excel_quotes [excel_file] [options]

Without arguments, quotes.xlsx is converted into quotes.json and
quotesMetadata.json in the current directory.
"""

import argparse
from typing import List, Optional

from .config import load_config
from .errors import QuoteConversionError
from .pipeline import ENGINES, default_engine, read_quotes_from_excel


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description='Convert a two-column quotes spreadsheet (tags, quote) into JSON')
	parser.add_argument('excel_file', nargs='?', help='Path to Excel file (default: quotes.xlsx)')
	parser.add_argument('--quotes-out', help='Quotes output file (default: quotes.json)')
	parser.add_argument('--metadata-out', help='Metadata output file (default: quotesMetadata.json)')
	parser.add_argument('--batch-size', type=int, help='Rows per internal batch (default: 100)')
	parser.add_argument('--engine', choices=ENGINES, help='Backend engine to use')
	return parser


def main(argv: Optional[List[str]] = None) -> None:
	args = build_parser().parse_args(argv)

	try:
		cfg = load_config(
			source=args.excel_file,
			quotes_output=args.quotes_out,
			metadata_output=args.metadata_out,
			batch_size=args.batch_size,
		)
	except ValueError as e:
		raise SystemExit(f"Invalid configuration: {e}")

	engine = args.engine or default_engine()
	try:
		result = read_quotes_from_excel(cfg.source, cfg, engine)
	except QuoteConversionError as e:
		raise SystemExit(f"Conversion failed: {e}")

	print("\nConversion completed successfully!")
	print(f"Quotes: {result.quotes_path} ({len(result.quotes)} quotes)")
	print(f"Metadata: {result.metadata_path}")


if __name__ == "__main__":
	main()
