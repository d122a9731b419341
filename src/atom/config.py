import codecs
import logging
import os
from enum import StrEnum
from typing import Final
from typing import Optional
from typing import final

from dotenv import load_dotenv

LOG_LEVEL_ENV_VARIABLE = "ATOM_LOG_LEVEL"
SOURCE_ENCODING_ENV_VARIABLE = "ATOM_SOURCE_ENCODING"
OUTPUT_FORMAT_ENV_VARIABLE = "ATOM_OUTPUT_FORMAT"

_DEFAULT_LOG_LEVEL: Final = "WARNING"
_DEFAULT_SOURCE_ENCODING: Final = "utf-8"


@final
class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


def get_environment_variable_or_default(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _parse_log_level(value: str) -> int:
    level: Final = logging.getLevelNamesMapping().get(value.upper())
    if level is None:
        raise ValueError(f"Environment variable '{LOG_LEVEL_ENV_VARIABLE}' has invalid log level '{value}'.")
    return level


def _parse_source_encoding(value: str) -> str:
    try:
        return codecs.lookup(value).name
    except LookupError as e:
        raise ValueError(f"Environment variable '{SOURCE_ENCODING_ENV_VARIABLE}' has unknown encoding '{value}'.") from e


def _parse_output_format(value: str) -> OutputFormat:
    try:
        return OutputFormat(value.lower())
    except ValueError as e:
        raise ValueError(
            f"Environment variable '{OUTPUT_FORMAT_ENV_VARIABLE}' must be one of "
            + f"{', '.join(output_format.value for output_format in OutputFormat)}, got '{value}'."
        ) from e


@final
class Config:
    def __init__(self) -> None:
        self._log_level: Optional[int] = None
        self._source_encoding: Optional[str] = None
        self._output_format: Optional[OutputFormat] = None
        self.reload()

    def reload(self) -> None:
        load_dotenv()
        self._log_level = _parse_log_level(
            get_environment_variable_or_default(LOG_LEVEL_ENV_VARIABLE, _DEFAULT_LOG_LEVEL)
        )
        self._source_encoding = _parse_source_encoding(
            get_environment_variable_or_default(SOURCE_ENCODING_ENV_VARIABLE, _DEFAULT_SOURCE_ENCODING)
        )
        self._output_format = _parse_output_format(
            get_environment_variable_or_default(OUTPUT_FORMAT_ENV_VARIABLE, OutputFormat.TEXT.value)
        )

    @property
    def log_level(self) -> int:
        if self._log_level is None:
            raise AssertionError("Log level is not set. This should not happen.")
        return self._log_level

    @property
    def source_encoding(self) -> str:
        if self._source_encoding is None:
            raise AssertionError("Source encoding is not set. This should not happen.")
        return self._source_encoding

    @property
    def output_format(self) -> OutputFormat:
        if self._output_format is None:
            raise AssertionError("Output format is not set. This should not happen.")
        return self._output_format
