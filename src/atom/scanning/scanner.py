import logging
from typing import Final
from typing import Optional
from typing import TypeAlias
from typing import final

from atom.scanning.escape_characters import ESCAPE_CHARACTERS
from atom.scanning.scan_error import ScanError
from atom.scanning.scan_error import ScanErrorKind
from atom.scanning.token import Token
from atom.scanning.token_types import TokenType

logger: Final = logging.getLogger(__name__)

_KEYWORDS: Final = {
    "true": TokenType.TRUE_LITERAL,
    "false": TokenType.FALSE_LITERAL,
    "null": TokenType.NULL_LITERAL,
    "this": TokenType.THIS_LITERAL,
    "super": TokenType.SUPER_LITERAL,
    "and": TokenType.AND,
    "or": TokenType.OR,
    "not": TokenType.NOT,
    "function": TokenType.FUNCTION,
    "class": TokenType.CLASS,
    "extends": TokenType.EXTENDS,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "do": TokenType.DO,
    "for": TokenType.FOR,
    "in": TokenType.IN,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "return": TokenType.RETURN,
}

# `/` and `.` are missing on purpose: both need lookahead to be told apart
# from comments and number literals respectively.
_SINGLE_CHAR_TOKENS: Final = {
    ";": TokenType.SEMICOLON,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "!": TokenType.BANG,
    "|": TokenType.PIPE,
    "&": TokenType.AMPERSAND,
    "^": TokenType.CARET,
    "%": TokenType.PERCENT,
    "~": TokenType.TILDE,
    "(": TokenType.LEFT_PARENTHESIS,
    ")": TokenType.RIGHT_PARENTHESIS,
    "[": TokenType.LEFT_SQUARE_BRACKET,
    "]": TokenType.RIGHT_SQUARE_BRACKET,
    "{": TokenType.LEFT_CURLY_BRACKET,
    "}": TokenType.RIGHT_CURLY_BRACKET,
}

_STRING_DELIMITERS: Final = {
    "'": TokenType.STRING_LITERAL,
    '"': TokenType.FORMATTED_STRING_LITERAL,
}

ScanResult: TypeAlias = Token | ScanError


@final
class Scanner:
    """Pull-based scanner that turns a named source buffer into tokens.

    Every call to `pull()` yields the next token, a `ScanError` describing a
    lexical problem, or `None` once the input is exhausted. Errors never leave
    the scanner in a broken state: the next pull continues right after the
    characters that were consumed while detecting the error.

    Columns start at 0 and are incremented before a character is consumed, so
    the first character of every line is reported at column 1.
    """

    def __init__(self, source_name: str, source: str) -> None:
        self._source_name = source_name
        self._source = source
        self._current_offset = 0
        self._line = 1
        self._column = 0

    def provide(self, source_name: str, source: str) -> None:
        logger.debug(f"Scanner switches from '{self._source_name}' to '{source_name}'.")
        self._source_name = source_name
        self._source = source
        self._current_offset = 0
        self._line = 1
        self._column = 0

    @property
    def source_name(self) -> str:
        return self._source_name

    @property
    def current_line(self) -> int:
        return self._line

    @property
    def current_column(self) -> int:
        return self._column

    def pull(self) -> Optional[ScanResult]:
        self._discard_whitespace()
        # While looking for comments we may run into a single slash, which is
        # the slash operator.
        result: Final = self._discard_comments()
        if result is not None:
            return result

        char: Final = self._current()
        if char is None:
            return None
        self._advance()

        match char:
            case c if c in _SINGLE_CHAR_TOKENS:
                return self._create_token(_SINGLE_CHAR_TOKENS[c], c)
            case "." if not Scanner._is_ascii_digit(self._current()):
                return self._create_token(TokenType.DOT, char)
            case c if c in _STRING_DELIMITERS:
                return self._scan_string(c)
            case c if c == "." or Scanner._is_ascii_digit(c):
                return self._scan_number(c)
            case c if Scanner._is_valid_identifier_start(c):
                return self._scan_identifier(c)
            case _:
                return self._create_error(
                    ScanErrorKind.UNEXPECTED_CHARACTER,
                    f"Unexpected character {char!r}.",
                )

    def scan_all(self) -> list[ScanResult]:
        """Pull until the end of input and return everything that was produced."""
        results: Final[list[ScanResult]] = []
        while (result := self.pull()) is not None:
            results.append(result)
        return results

    def _discard_comments(self) -> Optional[ScanResult]:
        # There can be several comments in a row before the next token.
        while self._current() == "/":
            self._advance()
            match self._current():
                case "/":
                    self._discard_line_comment()
                case "*":
                    self._advance()
                    if not self._discard_block_comment():
                        # Block comments are never closed implicitly by the end of input.
                        return self._create_error(
                            ScanErrorKind.UNTERMINATED_COMMENT,
                            "Expected '*/' but reached the end of input.",
                        )
                case None:
                    return None
                case _:
                    return self._create_token(TokenType.SLASH, "/")
            self._discard_whitespace()
        return None

    def _discard_line_comment(self) -> None:
        while (char := self._current()) is not None:
            self._advance()
            if char == "\n":
                break

    def _discard_block_comment(self) -> bool:
        while (char := self._advance()) is not None:
            # The slash is only inspected, not consumed, so that `**/` still
            # closes the comment.
            if char == "*" and self._current() == "/":
                self._advance()
                return True
        return False

    def _scan_number(self, first_char: str) -> Token:
        # Remember where the number started, consuming more digits moves the column.
        line: Final = self._line
        column: Final = self._column
        has_dot = first_char == "."
        characters: Final = [first_char]
        while (char := self._current()) is not None:
            if Scanner._is_ascii_digit(char):
                pass
            elif char == "." and not has_dot:
                has_dot = True
            else:
                break
            characters.append(char)
            self._advance()
        return Token(
            type=TokenType.NUMBER_LITERAL,
            source_name=self._source_name,
            line=line,
            column=column,
            lexeme="".join(characters),
        )

    def _scan_string(self, delimiter: str) -> ScanResult:
        line: Final = self._line
        column: Final = self._column
        characters: Final[list[str]] = []
        while True:
            char = self._advance()
            if char is None:
                return self._create_error(
                    ScanErrorKind.UNTERMINATED_STRING,
                    f"Expected {delimiter} but reached the end of input.",
                )
            if char == delimiter:
                break
            if char != "\\":
                characters.append(char)
                continue
            escaped_char = self._advance()
            if escaped_char is None:
                return self._create_error(
                    ScanErrorKind.UNEXPECTED_END_OF_INPUT_IN_ESCAPE,
                    "Expected an escape character but reached the end of input.",
                )
            decoded_char = ESCAPE_CHARACTERS.get(escaped_char)
            if decoded_char is None:
                return self._create_error(
                    ScanErrorKind.UNKNOWN_ESCAPE_CHARACTER,
                    f"Invalid escape sequence '\\{escaped_char}'.",
                )
            characters.append(decoded_char)
        return Token(
            type=_STRING_DELIMITERS[delimiter],
            source_name=self._source_name,
            line=line,
            column=column,
            lexeme="".join(characters),
        )

    def _scan_identifier(self, first_char: str) -> Token:
        line: Final = self._line
        column: Final = self._column
        characters: Final = [first_char]
        while (char := self._current()) is not None and Scanner._is_valid_identifier_continuation(char):
            characters.append(char)
            self._advance()
        lexeme: Final = "".join(characters)
        return Token(
            type=_KEYWORDS.get(lexeme, TokenType.IDENTIFIER),
            source_name=self._source_name,
            line=line,
            column=column,
            lexeme=lexeme,
        )

    @staticmethod
    def _is_ascii_digit(char: Optional[str]) -> bool:
        return char is not None and char.isascii() and char.isdigit()

    @staticmethod
    def _is_valid_identifier_start(char: str) -> bool:
        return char.isalpha() or char == "_"

    @staticmethod
    def _is_valid_identifier_continuation(char: str) -> bool:
        return char.isalnum() or char == "_"

    def _create_token(self, type_: TokenType, lexeme: str) -> Token:
        return Token(
            type=type_,
            source_name=self._source_name,
            line=self._line,
            column=self._column,
            lexeme=lexeme,
        )

    def _create_error(self, kind: ScanErrorKind, message: str) -> ScanError:
        error: Final = ScanError(
            kind=kind,
            message=message,
            source_name=self._source_name,
            line=self._line,
            column=self._column,
        )
        logger.debug(f"Lexical error: {error}")
        return error

    def _discard_whitespace(self) -> None:
        while (char := self._current()) is not None and char.isspace():
            self._advance()

    def _is_at_end(self) -> bool:
        return self._current_offset >= len(self._source)

    def _current(self) -> Optional[str]:
        return None if self._is_at_end() else self._source[self._current_offset]

    def _advance(self) -> Optional[str]:
        # Even an attempt to read past the end moves the column, which makes errors
        # at the end of input point just behind the last character.
        self._column += 1
        result: Final = self._current()
        if result is None:
            return None
        self._current_offset += 1
        if result == "\n":
            self._line += 1
            self._column = 0
        return result
