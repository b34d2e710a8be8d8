from typing import Iterable

from atmfjstc.lib.py_lang_utils.iteration import iter_with_first

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.ast.base import AbstractCodegenASTNode
from atmfjstc.lib.c_codegen.ast.raw import CodeLike, code


class NullNode(AbstractCodegenASTNode):
    """
    A node that renders nothing. You can substitute nodes in a sequence with NullNode to make them disappear.

    Unlike an empty `RawCode`, a `NullNode` inside a `CodeSet` does not take up a line.
    """
    AST_NODE_CONFIG = ()

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield from []


class CodeSet(AbstractCodegenASTNode):
    """
    A vertical sequence of code items (statements, declarations etc.) that are rendered one per line.

    Each item after the first is preceded by a newline and the current indentation. The first item is not, as the
    caller is responsible for positioning it. `NullNode` items are skipped entirely.

    Notes:

    - This is the main workhorse that is generally used to organize the top-level content of a file, or the statements
      inside a function body.
    - An empty `RawCode` item is rendered as a blank line.
    """
    AST_NODE_CONFIG = (
        ('CHILD_LIST', 'content', dict(type=AbstractCodegenASTNode)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        for item, is_first in iter_with_first(item for item in self.content if not isinstance(item, NullNode)):
            if not is_first:
                yield context.newline
                yield context.indent_text()

            yield from item.render_chunks(context)


class JoinedCode(AbstractCodegenASTNode):
    """
    A horizontal sequence of code items that are simply concatenated, e.g. the parts of a header like ``if (``,
    condition, ``)``.
    """
    AST_NODE_CONFIG = (
        ('CHILD_LIST', 'content', dict(type=AbstractCodegenASTNode)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        for item in self.content:
            yield from item.render_chunks(context)


class SeparatedCode(AbstractCodegenASTNode):
    """
    A horizontal sequence of code items with a separator between any two of them, e.g. function parameters separated
    by ``, ``. `NullNode` items are skipped and do not get a separator.
    """
    AST_NODE_CONFIG = (
        ('CHILD_LIST', 'items', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'separator', dict(type=AbstractCodegenASTNode)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        for item, is_first in iter_with_first(item for item in self.items if not isinstance(item, NullNode)):
            if not is_first:
                yield from self.separator.render_chunks(context)

            yield from item.render_chunks(context)


def lines(*items: CodeLike) -> CodeSet:
    """Convenience function for instantiating a CodeSet (strings become `RawCode` nodes)"""
    return CodeSet(code(item) for item in items)


def joined(*items: CodeLike) -> JoinedCode:
    """Convenience function for instantiating a JoinedCode (strings become `RawCode` nodes)"""
    return JoinedCode(code(item) for item in items)


def separated(items: Iterable[CodeLike], separator: CodeLike = ', ') -> SeparatedCode:
    """Convenience function for instantiating a SeparatedCode (strings become `RawCode` nodes)"""
    return SeparatedCode((code(item) for item in items), code(separator))
