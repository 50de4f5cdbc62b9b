from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from .errors import InvalidConfigurationError

ARRAY_FORMAT = 'array'
OBJECT_FORMAT = 'object'

_FORMAT_ALIASES = {
    'array': ARRAY_FORMAT,
    'array_of_objects': ARRAY_FORMAT,
    'object': OBJECT_FORMAT,
    'object_of_arrays': OBJECT_FORMAT,
}

_TRUE_STRINGS = {'1', 't', 'true', 'y', 'yes', 'on'}
_FALSE_STRINGS = {'0', 'f', 'false', 'n', 'no', 'off'}

_DELIMITER_ESCAPES = {'\\t': '\t', 'tab': '\t'}
_FORBIDDEN_DELIMITERS = {'"', '\n', '\r'}


@dataclass(frozen=True)
class ConversionOptions:
    """Settings for one conversion. Immutable once conversion begins."""

    delimiter: str = ','
    has_header: bool = True
    output_format: str = ARRAY_FORMAT
    pretty_print: bool = True
    infer_types: bool = True

    def validate(self) -> 'ConversionOptions':
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise InvalidConfigurationError(
                f"Delimiter must be a single character, got {self.delimiter!r}.",
                field='delimiter',
            )
        if self.delimiter in _FORBIDDEN_DELIMITERS:
            raise InvalidConfigurationError(
                f"Delimiter {self.delimiter!r} cannot be used as a separator.",
                field='delimiter',
            )
        if self.output_format not in (ARRAY_FORMAT, OBJECT_FORMAT):
            raise InvalidConfigurationError(
                f"Unknown output format {self.output_format!r}; use 'array' or 'object'.",
                field='output_format',
            )
        for name in ('has_header', 'pretty_print', 'infer_types'):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfigurationError(f"{name} must be a boolean.", field=name)
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> 'ConversionOptions':
        """Build options from loose user input (form fields, JSON bodies).

        Missing or None values keep their defaults; unknown keys are ignored.
        """
        options = cls()
        if not data:
            return options

        changes: dict = {}
        if data.get('delimiter') not in (None, ''):
            changes['delimiter'] = parse_delimiter(data['delimiter'])
        if data.get('output_format') not in (None, ''):
            changes['output_format'] = parse_output_format(data['output_format'])
        for name in ('has_header', 'pretty_print', 'infer_types'):
            if data.get(name) not in (None, ''):
                changes[name] = parse_bool(data[name], name)

        return replace(options, **changes).validate()


def parse_delimiter(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidConfigurationError("Delimiter must be a string.", field='delimiter')
    return _DELIMITER_ESCAPES.get(value.lower() if len(value) > 1 else value, value)


def parse_output_format(value: Any) -> str:
    key = str(value).strip().lower()
    if key not in _FORMAT_ALIASES:
        raise InvalidConfigurationError(
            f"Unknown output format {value!r}; use 'array' or 'object'.",
            field='output_format',
        )
    return _FORMAT_ALIASES[key]


def parse_bool(value: Any, name: str = 'value') -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise InvalidConfigurationError(f"{name} must be a boolean, got {value!r}.", field=name)
