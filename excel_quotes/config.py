#!/usr/bin/env python3
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


DEFAULT_SOURCE = "quotes.xlsx"
DEFAULT_QUOTES_OUTPUT = "quotes.json"
DEFAULT_METADATA_OUTPUT = "quotesMetadata.json"
DEFAULT_BATCH_SIZE = 100

PathLike = Union[str, Path]


@dataclass
class ConversionConfig:
	"""Where a conversion reads from, where it writes to, and how it batches rows."""
	source: Path = Path(DEFAULT_SOURCE)
	quotes_output: Path = Path(DEFAULT_QUOTES_OUTPUT)
	metadata_output: Path = Path(DEFAULT_METADATA_OUTPUT)
	batch_size: int = DEFAULT_BATCH_SIZE

	def __post_init__(self):
		self.source = Path(self.source)
		self.quotes_output = Path(self.quotes_output)
		self.metadata_output = Path(self.metadata_output)
		if isinstance(self.batch_size, bool) or not isinstance(self.batch_size, int) or self.batch_size <= 0:
			raise ValueError(f"batch_size must be a positive integer, got {self.batch_size!r}")


def load_config(
	source: Optional[PathLike] = None,
	quotes_output: Optional[PathLike] = None,
	metadata_output: Optional[PathLike] = None,
	batch_size: Optional[int] = None,
) -> ConversionConfig:
	# Output directories are not created here; a missing one fails at write time.
	return ConversionConfig(
		source=Path(source or os.getenv("QUOTES_SOURCE", DEFAULT_SOURCE)).expanduser(),
		quotes_output=Path(quotes_output or os.getenv("QUOTES_OUTPUT", DEFAULT_QUOTES_OUTPUT)).expanduser(),
		metadata_output=Path(metadata_output or os.getenv("QUOTES_METADATA_OUTPUT", DEFAULT_METADATA_OUTPUT)).expanduser(),
		batch_size=batch_size if batch_size is not None else int(os.getenv("QUOTES_BATCH_SIZE", str(DEFAULT_BATCH_SIZE))),
	)
