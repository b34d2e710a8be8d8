import re

from typing import Iterable, Union

from atmfjstc.lib.py_lang_utils.iteration import iter_with_first
from atmfjstc.lib.text_utils import check_single_line

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.ast.base import AbstractCodegenASTNode


class RawCode(AbstractCodegenASTNode):
    """
    A node containing literal code text that will be rendered as-is, except for line breaks.

    The first line is emitted as-is (the caller is responsible for having positioned it). Every subsequent line is
    preceded by a newline and the current indentation, so that multi-line text stays aligned with the code around it.
    Line breaks in the text (LF, CRLF or CR) are converted to the newline style of the context. Other control
    characters, such as form feeds, are kept as-is.
    """
    AST_NODE_CONFIG = (
        ('PARAM', 'text', dict(type=str)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        for line, is_first in iter_with_first(re.split(r'\r\n|\r|\n', self.text)):
            if not is_first:
                yield context.newline
                yield context.indent_text()

            yield line


class Atom(AbstractCodegenASTNode):
    """
    A node containing an unbreakable bit of text without newlines, such as a keyword or an operator.
    """
    AST_NODE_CONFIG = (
        ('PARAM', 'content', dict(type=str, check=check_single_line)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield self.content


class NewLine(AbstractCodegenASTNode):
    """
    A line terminator, in the newline style of the context. Note that no indentation follows.
    """
    AST_NODE_CONFIG = ()

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield context.newline


class Indentation(AbstractCodegenASTNode):
    """
    The indentation for the current indent level of the context.
    """
    AST_NODE_CONFIG = ()

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield context.indent_text()


CodeLike = Union[str, AbstractCodegenASTNode]


def code(value: CodeLike) -> AbstractCodegenASTNode:
    """
    Convenience function for accepting either a node or a plain string (which becomes a `RawCode` node)
    """
    return RawCode(value) if isinstance(value, str) else value
