"""
Rendering of braced blocks (function bodies, if/while/for bodies, struct and enum bodies) in the various brace styles.

Each supported brace style is implemented by one function that receives the block header (if any), the statements
in the body and the context, and decides everything about the layout:

- where the opening brace goes (after the header, or on a line of its own)
- how deeply the body is indented relative to the header
- where the closing brace goes, or whether it trails the last statement

The styles that are only reserved (Whitesmiths, Ratliff, Lisp) have no function, and asking for them raises an
`UnsupportedStyleError` before anything is rendered for the block.
"""

import logging

from typing import Iterable, Optional, Tuple

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.errors import UnsupportedStyleError
from atmfjstc.lib.c_codegen.styles import BraceStyle, IndentType, SyntacticContext
from atmfjstc.lib.c_codegen.ast.base import AbstractCodegenASTNode
from atmfjstc.lib.c_codegen.ast.raw import CodeLike, code
from atmfjstc.lib.c_codegen.ast.structural import CodeSet, JoinedCode, NullNode


LOG = logging.getLogger(__name__)


Statements = Tuple[AbstractCodegenASTNode, ...]


def render_block(
    header: Optional[AbstractCodegenASTNode], statements: Iterable[AbstractCodegenASTNode], context: CodegenContext
) -> Iterable[str]:
    """
    Renders a header followed by a braced body, in the brace style specified by the context.

    Args:
        header: The block header (e.g. ``if (x)``), or None for a bare block
        statements: The statements in the body. Each is rendered on its own line, except where the brace style
            dictates otherwise. `NullNode`'s are ignored.
        context: The context of the header. The body will be rendered one level deeper (or more, for some styles).

    Returns:
        A stream of text chunks.

    Raises:
        UnsupportedStyleError: If the brace style in the context is only reserved. This is raised immediately, before
            any text is produced.
    """
    renderer = _STYLE_RENDERERS.get(context.brace_style)
    if renderer is None:
        LOG.debug("Refusing to render block in reserved brace style %s", context.brace_style.name)
        raise UnsupportedStyleError(context.brace_style)

    return renderer(header, tuple(stmt for stmt in statements if not isinstance(stmt, NullNode)), context)


def render_continuation_glue(context: CodegenContext) -> str:
    """
    Returns the text that goes between the closing brace of a block and a keyword that continues it (e.g. ``else``).
    """
    if context.brace_style == BraceStyle.KNR:
        return ' '
    if context.brace_style == BraceStyle.NONE:
        return ''

    return context.newline + context.indent_text()


def _render_header(header: Optional[AbstractCodegenASTNode], context: CodegenContext, glue: str) -> Iterable[str]:
    if header is None:
        return

    yield from header.render_chunks(context)
    yield glue


def _render_body_lines(statements: Statements, body_context: CodegenContext) -> Iterable[str]:
    # Every statement goes on its own line, including the first
    if len(statements) == 0:
        return

    yield body_context.newline
    yield body_context.indent_text()
    yield from CodeSet(statements).render_chunks(body_context)


def _render_closer(context: CodegenContext) -> Iterable[str]:
    yield context.newline
    yield context.indent_text()
    yield '}'


def _render_allman(header: Optional[AbstractCodegenASTNode], statements: Statements, context: CodegenContext):
    yield from _render_header(header, context, context.newline + context.indent_text())
    yield '{'
    yield from _render_body_lines(statements, context.indented())
    yield from _render_closer(context)


def _render_knr(header: Optional[AbstractCodegenASTNode], statements: Statements, context: CodegenContext):
    yield from _render_header(header, context, ' ')
    yield '{'
    yield from _render_body_lines(statements, context.indented())
    yield from _render_closer(context)


def _render_gnu(header: Optional[AbstractCodegenASTNode], statements: Statements, context: CodegenContext):
    yield from _render_header(header, context, context.newline + context.indent_text())
    yield '{'
    yield from _render_body_lines(statements, context.indented(2))

    # The closing brace is half a level in, except for function bodies
    closer_context = context if context.syntactic_context == SyntacticContext.FUNCTION else context.indented()

    yield from _render_closer(closer_context)


def _first_statement_pad(context: CodegenContext) -> str:
    # Aligns the first statement, which shares the line with the opening brace, with the ones below it
    if (context.indent_type == IndentType.TABS) and (context.tabs_per_level > 0):
        return '\t' * context.tabs_per_level

    return ' ' * max(context.indent_width - 1, 1)


def _render_brace_and_first_statement(statements: Statements, context: CodegenContext):
    yield '{'

    if len(statements) > 0:
        yield _first_statement_pad(context)
        yield from CodeSet(statements).render_chunks(context.indented())


def _render_horstmann(header: Optional[AbstractCodegenASTNode], statements: Statements, context: CodegenContext):
    yield from _render_header(header, context, context.newline + context.indent_text())
    yield from _render_brace_and_first_statement(statements, context)
    yield from _render_closer(context)


def _render_pico(header: Optional[AbstractCodegenASTNode], statements: Statements, context: CodegenContext):
    yield from _render_header(header, context, context.newline + context.indent_text())
    yield from _render_brace_and_first_statement(statements, context)
    yield ' }'


def _render_none(header: Optional[AbstractCodegenASTNode], statements: Statements, context: CodegenContext):
    # Statements are packed together regardless of the newline and indent settings
    yield from _render_header(header, context, '')
    yield '{'
    yield from JoinedCode(statements).render_chunks(context.indented())
    yield '}'


_STYLE_RENDERERS = {
    BraceStyle.ALLMAN: _render_allman,
    BraceStyle.GNU: _render_gnu,
    BraceStyle.KNR: _render_knr,
    BraceStyle.HORSTMANN: _render_horstmann,
    BraceStyle.PICO: _render_pico,
    BraceStyle.NONE: _render_none,
}

SUPPORTED_BRACE_STYLES = frozenset(_STYLE_RENDERERS.keys())


class CodeBody(AbstractCodegenASTNode):
    """
    A braced block of statements, laid out according to the brace style of the context.

    When rendered on its own (without a header), the opening brace is emitted right where the caller positioned it.
    Use `HeaderPlusBody` (or one of the flow control and declaration nodes) to get the brace placed relative to a
    header.
    """
    AST_NODE_CONFIG = (
        ('CHILD_LIST', 'content', dict(type=AbstractCodegenASTNode)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield from render_block(None, self.content, context)


class HeaderPlusBody(AbstractCodegenASTNode):
    """
    A header (e.g. ``while (x)``) followed by a braced block, with the glue between them decided by the brace style.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'header', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'body', dict(type=CodeBody)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield from render_block(self.header, self.body.content, context)


def body(*statements: CodeLike) -> CodeBody:
    """Convenience function for instantiating a CodeBody (strings become `RawCode` statements)"""
    return CodeBody(code(statement) for statement in statements)
