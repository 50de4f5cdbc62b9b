from __future__ import annotations

from enum import Enum
from typing import List

from .errors import MalformedInputError

QUOTE = '"'
BOM = '﻿'


class _State(Enum):
    FIELD_START = 'field_start'
    IN_UNQUOTED_FIELD = 'in_unquoted_field'
    IN_QUOTED_FIELD = 'in_quoted_field'
    QUOTE_IN_QUOTED_FIELD = 'quote_in_quoted_field'


def parse(text: str, delimiter: str = ',') -> List[List[str]]:
    """Split delimited text into rows of raw string fields.

    Quoted fields may contain the delimiter, newlines and doubled quotes
    (`""` -> `"`). Quotes inside an unquoted field are kept literally.
    `\\r\\n` counts as a single line break, also inside quoted fields where it
    is stored as `\\n`. Blank lines produce no row.

    A closing quote must be followed by the delimiter, a line break, another
    quote or the end of input; anything else raises `MalformedInputError`, as
    does a quoted field left open at the end of input.
    """
    if text.startswith(BOM):
        text = text[1:]

    rows: List[List[str]] = []
    row: List[str] = []
    buf: List[str] = []
    state = _State.FIELD_START
    row_started = False

    line, column = 1, 0
    quote_line, quote_column = 1, 0

    def end_field() -> None:
        row.append(''.join(buf))
        buf.clear()

    def end_row() -> None:
        nonlocal row
        rows.append(row)
        row = []

    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        is_newline = ch == '\n'
        if ch == '\r' and i + 1 < length and text[i + 1] == '\n':
            is_newline = True
            i += 1
        i += 1
        column += 1

        if state is _State.FIELD_START:
            if ch == QUOTE:
                state = _State.IN_QUOTED_FIELD
                quote_line, quote_column = line, column
                row_started = True
            elif ch == delimiter:
                end_field()
                row_started = True
            elif is_newline:
                if row_started:
                    end_field()
                    end_row()
                row_started = False
            else:
                buf.append(ch)
                state = _State.IN_UNQUOTED_FIELD
                row_started = True

        elif state is _State.IN_UNQUOTED_FIELD:
            if ch == delimiter:
                end_field()
                state = _State.FIELD_START
            elif is_newline:
                end_field()
                end_row()
                state = _State.FIELD_START
                row_started = False
            else:
                buf.append(ch)

        elif state is _State.IN_QUOTED_FIELD:
            if ch == QUOTE:
                state = _State.QUOTE_IN_QUOTED_FIELD
            elif is_newline:
                buf.append('\n')
            else:
                buf.append(ch)

        else:  # QUOTE_IN_QUOTED_FIELD
            if ch == QUOTE:
                buf.append(QUOTE)
                state = _State.IN_QUOTED_FIELD
            elif ch == delimiter:
                end_field()
                state = _State.FIELD_START
            elif is_newline:
                end_field()
                end_row()
                state = _State.FIELD_START
                row_started = False
            else:
                raise MalformedInputError(
                    f"Unexpected character {ch!r} after closing quote",
                    line=line,
                    column=column,
                )

        if is_newline:
            line += 1
            column = 0

    if state is _State.IN_QUOTED_FIELD:
        raise MalformedInputError(
            "Quoted field is never closed", line=quote_line, column=quote_column
        )
    if row_started:
        end_field()
        end_row()

    return rows
