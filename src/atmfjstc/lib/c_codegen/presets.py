"""
Named house styles, each expressed as a preset `CodegenContext`.

Presets are plain data. To tweak one, use ``from_style(style, **overrides)`` or call `derive` on the
result of `context_for_style`.
"""

from enum import Enum, auto

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.styles import BraceStyle, IndentType, NewlineType


class CodeStyle(Enum):
    ALLMAN = auto()
    GNU = auto()
    WHITESMITHS = auto()
    KNR = auto()
    RATLIFF = auto()
    HORSTMANN = auto()
    PICO = auto()
    LISP = auto()
    MINIMAL = auto()
    DEFAULT = auto()


_PRESETS = {
    CodeStyle.ALLMAN: CodegenContext(brace_style=BraceStyle.ALLMAN),
    CodeStyle.GNU: CodegenContext(brace_style=BraceStyle.GNU, indent_width=2),
    CodeStyle.WHITESMITHS: CodegenContext(brace_style=BraceStyle.WHITESMITHS),
    CodeStyle.KNR: CodegenContext(brace_style=BraceStyle.KNR),
    CodeStyle.RATLIFF: CodegenContext(brace_style=BraceStyle.RATLIFF),
    CodeStyle.HORSTMANN: CodegenContext(brace_style=BraceStyle.HORSTMANN),
    CodeStyle.PICO: CodegenContext(brace_style=BraceStyle.PICO),
    CodeStyle.LISP: CodegenContext(brace_style=BraceStyle.LISP),
    CodeStyle.MINIMAL: CodegenContext(brace_style=BraceStyle.NONE, indent_width=0, newline_type=NewlineType.NONE),
    CodeStyle.DEFAULT: CodegenContext(brace_style=BraceStyle.KNR, indent_type=IndentType.TABS),
}


def context_for_style(style: CodeStyle) -> CodegenContext:
    """
    Returns the preset context for a named style.

    Note that the presets for the reserved brace styles (Whitesmiths, Ratliff, Lisp) can be created, but any attempt
    to render a block with them will fail with an `UnsupportedStyleError`.
    """
    return _PRESETS[style]


def from_style(style: CodeStyle, **overrides) -> CodegenContext:
    """
    Creates a context based on one of the named presets, with optional field overrides.

    Args:
        style: A `CodeStyle` preset
        overrides: Any of the `CodegenContext.derive` parameters, applied on top of the preset

    Returns:
        The resulting context.
    """
    return context_for_style(style).derive(**overrides)
