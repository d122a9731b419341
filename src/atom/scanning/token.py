from typing import NamedTuple
from typing import final

from atom.scanning.token_types import TokenType


@final
class Token(NamedTuple):
    type: TokenType
    source_name: str
    line: int
    column: int
    lexeme: str
