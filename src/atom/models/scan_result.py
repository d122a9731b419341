from typing import Self
from typing import final

from pydantic.main import BaseModel

from atom.scanning.scan_error import ScanError
from atom.scanning.token import Token


@final
class TokenModel(BaseModel):
    type: str
    line: int
    column: int
    lexeme: str

    @classmethod
    def from_token(cls, token: Token) -> Self:
        return cls(
            type=token.type.name,
            line=token.line,
            column=token.column,
            lexeme=token.lexeme,
        )


@final
class ScanErrorModel(BaseModel):
    kind: str
    message: str
    line: int
    column: int

    @classmethod
    def from_scan_error(cls, error: ScanError) -> Self:
        return cls(
            kind=error.kind.name,
            message=error.message,
            line=error.line,
            column=error.column,
        )


@final
class ScanResultModel(BaseModel):
    source_name: str
    tokens: list[TokenModel]
    errors: list[ScanErrorModel]
