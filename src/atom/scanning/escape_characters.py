"""Escape character mappings for string literals."""

from typing import Final

ESCAPE_CHARACTERS: Final[dict[str, str]] = {
    "'": "'",
    '"': '"',
    "t": "\t",
    "r": "\r",
    "n": "\n",
    "\\": "\\",
}
