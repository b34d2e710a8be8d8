"""
Enumerations for the various axes along which the rendering style can vary.
"""

from enum import Enum, auto


class BraceStyle(Enum):
    """
    Where braces and indents are placed relative to the header of a block.

    Only ALLMAN, GNU, KNR, HORSTMANN, PICO and NONE have a defined layout. The others are reserved, and rendering a
    block under them raises `UnsupportedStyleError`.
    """
    ALLMAN = auto()
    GNU = auto()
    WHITESMITHS = auto()
    KNR = auto()
    RATLIFF = auto()
    HORSTMANN = auto()
    PICO = auto()
    LISP = auto()
    NONE = auto()


class IndentType(Enum):
    SPACES = auto()
    TABS = auto()


class NewlineType(Enum):
    CR = '\r'
    LF = '\n'
    CRLF = '\r\n'
    NONE = ''


class SyntacticContext(Enum):
    """
    The kind of construct currently being rendered. Some brace styles have special cases for certain contexts (e.g.
    GNU style treats function bodies differently).
    """
    IF = auto()
    WHILE = auto()
    FOR_LOOP = auto()
    FUNCTION = auto()
    FILE = auto()
    STRUCT = auto()
    ENUM = auto()
    OTHER = auto()


class NameRole(Enum):
    """
    The role an identifier plays in the code. Each role selects its own casing rule in the `CaseRules`.
    """
    DEFAULT = auto()
    TYPE = auto()
    MEMBER = auto()
    FUNCTION = auto()
    CONST_DEFINE = auto()
    FILE_NAME = auto()
