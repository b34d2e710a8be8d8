from typing import Iterable

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.styles import SyntacticContext
from atmfjstc.lib.c_codegen.ast.base import AbstractCodegenASTNode
from atmfjstc.lib.c_codegen.ast.block import CodeBody, render_block, render_continuation_glue
from atmfjstc.lib.c_codegen.ast.raw import Atom
from atmfjstc.lib.c_codegen.ast.structural import JoinedCode


class IfStatement(AbstractCodegenASTNode):
    """
    An ``if (<condition>) { ... }`` statement, with an optional ``else { ... }`` clause.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'condition', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'body', dict(type=CodeBody)),
        ('CHILD', 'else_body', dict(type=CodeBody, default=None, allow_none=True)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        context = context.in_context(SyntacticContext.IF)

        header = JoinedCode((Atom('if ('), self.condition, Atom(')')))

        yield from render_block(header, self.body.content, context)

        if self.else_body is not None:
            yield render_continuation_glue(context)
            yield from render_block(Atom('else'), self.else_body.content, context)


class WhileStatement(AbstractCodegenASTNode):
    AST_NODE_CONFIG = (
        ('CHILD', 'condition', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'body', dict(type=CodeBody)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        header = JoinedCode((Atom('while ('), self.condition, Atom(')')))

        yield from render_block(header, self.body.content, context.in_context(SyntacticContext.WHILE))


class ForLoop(AbstractCodegenASTNode):
    """
    A ``for (<init>; <condition>; <update>) { ... }`` loop.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'init', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'condition', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'update', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'body', dict(type=CodeBody)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        header = JoinedCode((
            Atom('for ('), self.init, Atom('; '), self.condition, Atom('; '), self.update, Atom(')')
        ))

        yield from render_block(header, self.body.content, context.in_context(SyntacticContext.FOR_LOOP))
