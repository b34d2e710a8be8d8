from typing import Iterable, Tuple, Union

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.styles import SyntacticContext, NameRole
from atmfjstc.lib.c_codegen.ast.base import AbstractCodegenASTNode
from atmfjstc.lib.c_codegen.ast.block import CodeBody, render_block
from atmfjstc.lib.c_codegen.ast.names import with_role, as_identifier


class Parameter(AbstractCodegenASTNode):
    """
    A function parameter, rendered as ``<type> <name>``. Identifiers get the TYPE and MEMBER roles respectively.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'type_name', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'name', dict(type=AbstractCodegenASTNode)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield from with_role(self.type_name, NameRole.TYPE).render_chunks(context)
        yield ' '
        yield from with_role(self.name, NameRole.MEMBER).render_chunks(context)


class FunctionSignature(AbstractCodegenASTNode):
    """
    A function signature, e.g. ``int add(int a, int b)``.

    The return type gets the TYPE role and the function name gets the FUNCTION role, if they are identifiers. Use
    a `RawCode` or `Atom` for built-in types such as ``int`` that should not be re-cased.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'return_type', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'name', dict(type=AbstractCodegenASTNode)),
        ('CHILD_LIST', 'parameters', dict(type=Parameter, default=())),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield from with_role(self.return_type, NameRole.TYPE).render_chunks(context)
        yield ' '
        yield from with_role(self.name, NameRole.FUNCTION).render_chunks(context)
        yield '('

        for index, parameter in enumerate(self.parameters):
            if index > 0:
                yield ', '

            yield from parameter.render_chunks(context)

        yield ')'


class FunctionDeclaration(AbstractCodegenASTNode):
    """
    A function prototype, i.e. the signature followed by ``;``.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'signature', dict(type=FunctionSignature)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield from self.signature.render_chunks(context)
        yield ';'


class Function(AbstractCodegenASTNode):
    """
    A function definition: the signature followed by a braced body.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'signature', dict(type=FunctionSignature)),
        ('CHILD', 'body', dict(type=CodeBody)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield from render_block(self.signature, self.body.content, context.in_context(SyntacticContext.FUNCTION))


class FunctionCall(AbstractCodegenASTNode):
    """
    A call such as ``do_stuff(a, b)``, optionally terminated with ``;`` so that it can serve as a statement.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'name', dict(type=AbstractCodegenASTNode)),
        ('CHILD_LIST', 'arguments', dict(type=AbstractCodegenASTNode, default=())),
        ('PARAM', 'terminated', dict(type=bool, default=False, kw_only=True)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield from with_role(self.name, NameRole.FUNCTION).render_chunks(context)
        yield '('

        for index, argument in enumerate(self.arguments):
            if index > 0:
                yield ', '

            yield from argument.render_chunks(context)

        yield ')'

        if self.terminated:
            yield ';'


TypeLike = Union[str, AbstractCodegenASTNode]


def signature(
    return_type: TypeLike, function_name: TypeLike, parameters: Iterable[Tuple[TypeLike, TypeLike]] = ()
) -> FunctionSignature:
    """
    Convenience function for instantiating a FunctionSignature. Text values are parsed as `Name`'s.

    Example::

        signature(code('int'), 'ADD', [(code('int'), 'a'), (code('int'), 'b')])
    """
    return FunctionSignature(
        as_identifier(return_type, NameRole.TYPE),
        as_identifier(function_name, NameRole.FUNCTION),
        (
            Parameter(as_identifier(type_name, NameRole.TYPE), as_identifier(param_name, NameRole.MEMBER))
            for type_name, param_name in parameters
        ),
    )


def call(function_name: TypeLike, *arguments: AbstractCodegenASTNode, terminated: bool = False) -> FunctionCall:
    """
    Convenience function for instantiating a FunctionCall. A text function name is parsed as a `Name`.
    """
    return FunctionCall(as_identifier(function_name, NameRole.FUNCTION), arguments, terminated=terminated)
