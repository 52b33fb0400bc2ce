#!/usr/bin/env python3
from datetime import datetime
from typing import Optional

from .models import Metadata, Schema


METADATA_VERSION = "1.0"
SOURCE_URL = "path/to/file"


def rfc3339(moment: datetime) -> str:
	if moment.tzinfo is None:
		moment = moment.astimezone()
	text = moment.isoformat(timespec="seconds")
	if text.endswith("+00:00"):
		text = text[:-6] + "Z"
	return text


def build_metadata(total_quotes: int, now: Optional[datetime] = None) -> Metadata:
	"""Describe a conversion that produced `total_quotes` records."""
	return Metadata(
		version=METADATA_VERSION,
		last_updated=rfc3339(now or datetime.now().astimezone()),
		total_quotes=total_quotes,
		url=SOURCE_URL,
		schema=Schema(format="JSON", encoding="UTF-8", filetype="text"),
	)
