from typing import Iterable, Optional, Tuple, Union

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.styles import SyntacticContext, NameRole
from atmfjstc.lib.c_codegen.ast.base import AbstractCodegenASTNode
from atmfjstc.lib.c_codegen.ast.block import render_block
from atmfjstc.lib.c_codegen.ast.names import with_role, as_identifier
from atmfjstc.lib.c_codegen.ast.raw import Atom


class StructMember(AbstractCodegenASTNode):
    """
    A member declaration inside a struct, rendered as ``<type> <name>;``
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'type_name', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'name', dict(type=AbstractCodegenASTNode)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield from with_role(self.type_name, NameRole.TYPE).render_chunks(context)
        yield ' '
        yield from with_role(self.name, NameRole.MEMBER).render_chunks(context)
        yield ';'


class StructDeclaration(AbstractCodegenASTNode):
    """
    A ``typedef struct { ... } Name;`` declaration.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'name', dict(type=AbstractCodegenASTNode)),
        ('CHILD_LIST', 'members', dict(type=StructMember)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        context = context.in_context(SyntacticContext.STRUCT)

        yield from render_block(Atom('typedef struct'), self.members, context)
        yield ' '
        yield from with_role(self.name, NameRole.TYPE).render_chunks(context)
        yield ';'


class EnumEntry(AbstractCodegenASTNode):
    """
    An entry in an enum, rendered as ``NAME = <value>,`` or just ``NAME,`` if it has no explicit value.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'name', dict(type=AbstractCodegenASTNode)),
        ('PARAM', 'value', dict(type=int, default=None, allow_none=True)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield from with_role(self.name, NameRole.CONST_DEFINE).render_chunks(context)

        if self.value is not None:
            yield f" = {self.value}"

        yield ','


class EnumDeclaration(AbstractCodegenASTNode):
    """
    A ``typedef enum { ... } Name;`` declaration.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'name', dict(type=AbstractCodegenASTNode)),
        ('CHILD_LIST', 'entries', dict(type=EnumEntry)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        context = context.in_context(SyntacticContext.ENUM)

        yield from render_block(Atom('typedef enum'), self.entries, context)
        yield ' '
        yield from with_role(self.name, NameRole.TYPE).render_chunks(context)
        yield ';'


class TypeDef(AbstractCodegenASTNode):
    """
    A ``typedef <defined_type> <name>;`` declaration.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'name', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'defined_type', dict(type=AbstractCodegenASTNode)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield 'typedef '
        yield from with_role(self.defined_type, NameRole.TYPE).render_chunks(context)
        yield ' '
        yield from with_role(self.name, NameRole.TYPE).render_chunks(context)
        yield ';'


class ConstDefine(AbstractCodegenASTNode):
    """
    A ``#define NAME <value>`` preprocessor constant.
    """
    AST_NODE_CONFIG = (
        ('CHILD', 'name', dict(type=AbstractCodegenASTNode)),
        ('CHILD', 'value', dict(type=AbstractCodegenASTNode)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield '#define '
        yield from with_role(self.name, NameRole.CONST_DEFINE).render_chunks(context)
        yield ' '
        yield from self.value.render_chunks(context)


IdentifierLike = Union[str, AbstractCodegenASTNode]


def struct(struct_name: IdentifierLike, members: Iterable[Tuple[IdentifierLike, IdentifierLike]]) -> StructDeclaration:
    """
    Convenience function for instantiating a StructDeclaration from ``(type, name)`` pairs. Text is parsed as `Name`'s.
    """
    return StructDeclaration(
        as_identifier(struct_name, NameRole.TYPE),
        (
            StructMember(as_identifier(type_name, NameRole.TYPE), as_identifier(member_name, NameRole.MEMBER))
            for type_name, member_name in members
        ),
    )


def enum(enum_name: IdentifierLike, entries: Iterable[Tuple[IdentifierLike, Optional[int]]]) -> EnumDeclaration:
    """
    Convenience function for instantiating an EnumDeclaration from ``(name, value)`` pairs (the value may be None).
    """
    return EnumDeclaration(
        as_identifier(enum_name, NameRole.TYPE),
        (EnumEntry(as_identifier(entry_name, NameRole.CONST_DEFINE), value) for entry_name, value in entries),
    )
