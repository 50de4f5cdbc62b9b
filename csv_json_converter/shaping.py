from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from .errors import EmptyInputError, RaggedRowError
from .inference import TypedValue, coerce_field
from .options import OBJECT_FORMAT


def resolve_header(rows: Sequence[List[str]], has_header: bool) -> Tuple[List[str], Sequence[List[str]]]:
    """Split parsed rows into (header, data rows).

    Without a header row, names are the column positions "0".."N-1" taken from
    the first row's width.
    """
    if not rows:
        raise EmptyInputError()

    if has_header:
        return list(rows[0]), rows[1:]
    return [str(i) for i in range(len(rows[0]))], rows


def check_row_widths(header: List[str], data_rows: Sequence[List[str]]) -> None:
    expected = len(header)
    for idx, row in enumerate(data_rows):
        if len(row) != expected:
            raise RaggedRowError(idx, expected, len(row))


def shape_array_of_objects(
    header: List[str],
    data_rows: Sequence[List[str]],
    infer_types: bool,
) -> List[Dict[str, TypedValue]]:
    records: List[Dict[str, TypedValue]] = []
    for row in data_rows:
        record: Dict[str, TypedValue] = {}
        # Duplicate header names: the later column wins.
        for name, raw in zip(header, row):
            record[name] = coerce_field(raw, infer_types)
        records.append(record)
    return records


def shape_object_of_arrays(
    header: List[str],
    data_rows: Sequence[List[str]],
    infer_types: bool,
) -> Dict[str, List[TypedValue]]:
    columns: Dict[str, List[TypedValue]] = {}
    for col_idx, name in enumerate(header):
        columns[name] = [coerce_field(row[col_idx], infer_types) for row in data_rows]
    return columns


def shape_rows(
    rows: Sequence[List[str]],
    has_header: bool,
    output_format: str,
    infer_types: bool,
) -> Any:
    header, data_rows = resolve_header(rows, has_header)
    check_row_widths(header, data_rows)

    if output_format == OBJECT_FORMAT:
        return shape_object_of_arrays(header, data_rows, infer_types)
    return shape_array_of_objects(header, data_rows, infer_types)
