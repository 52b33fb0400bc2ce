#!/usr/bin/env python3
from typing import Iterable, List

from .config import DEFAULT_BATCH_SIZE
from .models import Quote


class BatchAccumulator:
	"""Collects quotes in fixed-size batches and keeps them in arrival order."""

	def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE):
		if batch_size <= 0:
			raise ValueError(f"batch_size must be a positive integer, got {batch_size}")
		self.batch_size = batch_size
		self._batch: List[Quote] = []
		self._records: List[Quote] = []
		self.batches_flushed = 0

	def add(self, quote: Quote) -> None:
		self._batch.append(quote)
		if len(self._batch) >= self.batch_size:
			self.flush()

	def flush(self) -> None:
		if not self._batch:
			return
		self._records.extend(self._batch)
		self._batch = []
		self.batches_flushed += 1

	@property
	def records(self) -> List[Quote]:
		"""Everything added so far, including a pending partial batch."""
		self.flush()
		return list(self._records)


def accumulate(quotes: Iterable[Quote], batch_size: int = DEFAULT_BATCH_SIZE) -> List[Quote]:
	acc = BatchAccumulator(batch_size)
	for q in quotes:
		acc.add(q)
	return acc.records
