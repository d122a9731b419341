from enum import Enum
from enum import auto
from typing import final


@final
class TokenType(Enum):
    SEMICOLON = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    BANG = auto()
    PIPE = auto()
    AMPERSAND = auto()
    CARET = auto()
    PERCENT = auto()
    TILDE = auto()
    DOT = auto()
    LEFT_PARENTHESIS = auto()
    RIGHT_PARENTHESIS = auto()
    LEFT_SQUARE_BRACKET = auto()
    RIGHT_SQUARE_BRACKET = auto()
    LEFT_CURLY_BRACKET = auto()
    RIGHT_CURLY_BRACKET = auto()

    NUMBER_LITERAL = auto()
    STRING_LITERAL = auto()
    FORMATTED_STRING_LITERAL = auto()
    TRUE_LITERAL = auto()
    FALSE_LITERAL = auto()
    NULL_LITERAL = auto()
    THIS_LITERAL = auto()
    SUPER_LITERAL = auto()

    IDENTIFIER = auto()

    AND = auto()
    OR = auto()
    NOT = auto()
    FUNCTION = auto()
    CLASS = auto()
    EXTENDS = auto()
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    DO = auto()
    FOR = auto()
    IN = auto()
    BREAK = auto()
    CONTINUE = auto()
    RETURN = auto()
