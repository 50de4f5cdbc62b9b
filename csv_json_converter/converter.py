"""Conversion entry points shared by the UI, the HTTP API and the CLI."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from .options import ConversionOptions
from .shaping import shape_rows
from .tokenizer import parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionSummary:
    records: int
    columns: int

    def describe(self) -> str:
        return f"Converted {self.records} record(s) with {self.columns} column(s)."


def convert(rows: Sequence[List[str]], options: ConversionOptions) -> Any:
    """Turn parsed rows into the JSON layout requested by `options`.

    Raises `EmptyInputError` for no rows and `RaggedRowError` when a data row's
    width differs from the header. No partial result is produced on failure.
    """
    options.validate()
    return shape_rows(rows, options.has_header, options.output_format, options.infer_types)


def convert_csv_to_json(raw_text: str, options: Optional[ConversionOptions] = None) -> Any:
    options = (options or ConversionOptions()).validate()
    rows = parse(raw_text, options.delimiter)
    logger.debug("Parsed %d row(s) with delimiter %r", len(rows), options.delimiter)
    return convert(rows, options)


def to_json_text(value: Any, pretty_print: bool = True) -> str:
    if pretty_print:
        return json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False, allow_nan=False)


def convert_csv_to_json_text(raw_text: str, options: Optional[ConversionOptions] = None) -> str:
    options = (options or ConversionOptions()).validate()
    return to_json_text(convert_csv_to_json(raw_text, options), options.pretty_print)


def summarize(value: Any) -> ConversionSummary:
    """Count records and columns of a converted value, whichever layout it uses."""
    if isinstance(value, dict):
        lengths = [len(v) for v in value.values()]
        return ConversionSummary(records=max(lengths) if lengths else 0, columns=len(value))
    if isinstance(value, list):
        return ConversionSummary(records=len(value), columns=len(value[0]) if value else 0)
    return ConversionSummary(records=0, columns=0)
