from typing import Iterable, Optional, Union

from atmfjstc.lib.text_utils import check_single_line

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.casing import CaseType, casify, casify_text, split_fragments
from atmfjstc.lib.c_codegen.styles import NameRole
from atmfjstc.lib.c_codegen.ast.base import AbstractCodegenASTNode


def _check_parts(parts):
    if len(parts) == 0:
        raise ValueError("Name must have at least one part")

    for part in parts:
        if not isinstance(part, str) or (part == '') or (part != part.lower()):
            raise ValueError(f"Name parts must be non-empty lowercase strings, got {part!r}")


class _CasedIdentifier(AbstractCodegenASTNode):
    AST_NODE_CONFIG = (
        'abstract',
        ('PARAM', 'role', dict(type=NameRole, default=NameRole.DEFAULT, kw_only=True)),
        ('PARAM', 'fixed_case', dict(type=CaseType, default=None, allow_none=True, kw_only=True)),
    )

    def case_type(self, context: CodegenContext) -> CaseType:
        """
        The casing rule in effect for this identifier: the pinned one if any, otherwise the one for its role.
        """
        return self.fixed_case if self.fixed_case is not None else context.case_for_role(self.role)

    def with_role(self, role: NameRole):
        """
        Returns a copy of this identifier with a different role. A pinned case (see `with_case`) is preserved, as it
        applies regardless of role.
        """
        return self if role == self.role else self.alter(role=role)

    def with_case(self, case_type: CaseType):
        """
        Returns a copy of this identifier that is always rendered in a given case type, regardless of its role.
        """
        return self.alter(fixed_case=case_type)


class Name(_CasedIdentifier):
    """
    An identifier, stored in canonical form (lowercase word fragments) and rendered in the case type that the context
    specifies for its role.

    Use the `name()` function to parse a Name from text.
    """
    AST_NODE_CONFIG = (
        ('PARAM', 'parts', dict(type=tuple, check=_check_parts)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield casify(self.parts, self.case_type(context))


class CasedText(_CasedIdentifier):
    """
    Identifier-like free text that is re-cased on the fly, without being split into fragments beforehand.

    Word boundaries are recognized at upper-case characters and at explicit boundary markers (`CASE_SEPARATOR`), e.g.
    ``CasedText('paramName')`` and ``CasedText('param`name')`` both render as ``param_name`` for a snake case rule.
    """
    AST_NODE_CONFIG = (
        ('PARAM', 'text', dict(type=str, check=check_single_line)),
    )

    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        yield casify_text(self.text, self.case_type(context))


NameLike = Union[str, Name]


def name(value: NameLike, role: Optional[NameRole] = None) -> Name:
    """
    Convenience function for obtaining a `Name` from text (or an existing `Name`).

    The text is split on underscores, empty fragments are dropped and the rest are lowercased, e.g. ``'MY_VARIABLE'``
    gives the fragments ``('my', 'variable')``. Text with no fragments at all (e.g. ``''`` or ``'__'``) becomes the
    placeholder name ``invalid_name``, so a Name never renders as empty text.

    Args:
        value: The text to parse, or an already built `Name`
        role: If not None, the role to assign to the name

    Returns:
        The resulting `Name`.
    """
    result = value if isinstance(value, Name) else Name(split_fragments(value))

    return result if role is None else result.with_role(role)


def with_role(node: AbstractCodegenASTNode, role: NameRole) -> AbstractCodegenASTNode:
    """
    Assigns a role to a node, if it is an identifier (`Name` or `CasedText`). Other nodes (e.g. `RawCode` for ``int``)
    are returned unchanged.
    """
    return node.with_role(role) if isinstance(node, _CasedIdentifier) else node


def as_identifier(value: Union[str, AbstractCodegenASTNode], role: NameRole) -> AbstractCodegenASTNode:
    """
    Convenience function for accepting either text (parsed as a `Name`) or a node in places where an identifier is
    expected. In both cases the role is applied (if the node is an identifier).
    """
    return name(value, role) if isinstance(value, str) else with_role(value, role)
