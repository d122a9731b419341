from enum import Enum
from enum import auto
from typing import NamedTuple
from typing import final


@final
class ScanErrorKind(Enum):
    UNEXPECTED_CHARACTER = auto()
    UNTERMINATED_COMMENT = auto()
    UNTERMINATED_STRING = auto()
    UNKNOWN_ESCAPE_CHARACTER = auto()
    UNEXPECTED_END_OF_INPUT_IN_ESCAPE = auto()


@final
class ScanError(NamedTuple):
    """A lexical error reported by the scanner.

    The position is where the scanner's cursor was when the problem was
    detected, which is not necessarily the start of the offending lexeme.
    """

    kind: ScanErrorKind
    message: str
    source_name: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.source_name}:{self.line}:{self.column}: error: {self.message}"
