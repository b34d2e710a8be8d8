from typing import Iterable

from atmfjstc.lib.text_utils import check_single_line

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.casing import CaseType
from atmfjstc.lib.c_codegen.styles import SyntacticContext, NameRole
from atmfjstc.lib.c_codegen.ast.base import AbstractCodegenASTNode
from atmfjstc.lib.c_codegen.ast.names import Name
from atmfjstc.lib.c_codegen.ast.structural import CodeSet


class HeaderFile(AbstractCodegenASTNode):
    """
    The complete content of a C header file, wrapped in an include guard.

    The guard token is derived from the file name, which is always rendered in SCREAMING_SNAKE_CASE regardless of the
    case rules in effect, e.g. a file named ``'my header'`` (or ``'MY_HEADER'``) gets the guard ``MY_HEADER_H``.

    The content items are rendered one per line (as in a `CodeSet`), and the file ends with a newline.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'file_name', dict(type=Name)),
        ('CHILD_LIST', 'content', dict(type=AbstractCodegenASTNode)),
    )

    def guard_token(self, context: CodegenContext) -> str:
        return self.file_name.with_role(NameRole.FILE_NAME).with_case(CaseType.SCREAMING_SNAKE).render(context) + '_H'

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        context = context.in_context(SyntacticContext.FILE)
        guard = self.guard_token(context)
        newline = context.newline

        yield f"#ifndef {guard}"
        yield newline
        yield f"#define {guard}"
        yield newline
        yield newline

        yield from CodeSet(self.content).render_chunks(context)

        yield newline
        yield newline
        yield "#endif"
        yield newline


class Include(AbstractCodegenASTNode):
    """
    An ``#include "path"`` directive, or ``#include <path>`` for system headers.
    """
    AST_NODE_CONFIG = (
        ('PARAM', 'path', dict(type=str, check=check_single_line)),
        ('PARAM', 'system', dict(type=bool, default=False, kw_only=True)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield f"#include <{self.path}>" if self.system else f"#include \"{self.path}\""
