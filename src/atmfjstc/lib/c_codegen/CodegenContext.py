from dataclasses import dataclass

from atmfjstc.lib.c_codegen.casing import CaseType
from atmfjstc.lib.c_codegen.styles import BraceStyle, IndentType, NewlineType, SyntacticContext, NameRole


def _coalesce(a, b):
    return a if b is None else b


@dataclass(frozen=True)
class CaseRules:
    """
    The casing rule that applies to identifiers in each role.

    Attributes:
        type_case: For type names (structs, enums, typedefs, return and parameter types)
        member_case: For member and parameter names
        function_case: For function names
        const_define_case: For ``#define`` constants and enum entries
        file_name_case: For file names
        default_case: For identifiers that have no particular role
    """

    type_case: CaseType = CaseType.PASCAL
    member_case: CaseType = CaseType.SNAKE
    function_case: CaseType = CaseType.SNAKE
    const_define_case: CaseType = CaseType.SCREAMING_SNAKE
    file_name_case: CaseType = CaseType.PASCAL
    default_case: CaseType = CaseType.SNAKE

    def derive(self, type_case=None, member_case=None, function_case=None, const_define_case=None,
               file_name_case=None, default_case=None):
        """
        Creates a copy of these rules with some of them overridden (None leaves the rule unchanged).
        """
        return CaseRules(
            type_case=_coalesce(self.type_case, type_case),
            member_case=_coalesce(self.member_case, member_case),
            function_case=_coalesce(self.function_case, function_case),
            const_define_case=_coalesce(self.const_define_case, const_define_case),
            file_name_case=_coalesce(self.file_name_case, file_name_case),
            default_case=_coalesce(self.default_case, default_case),
        )

    def for_role(self, role: NameRole) -> CaseType:
        return {
            NameRole.DEFAULT: self.default_case,
            NameRole.TYPE: self.type_case,
            NameRole.MEMBER: self.member_case,
            NameRole.FUNCTION: self.function_case,
            NameRole.CONST_DEFINE: self.const_define_case,
            NameRole.FILE_NAME: self.file_name_case,
        }[role]


@dataclass(frozen=True)
class CodegenContext:
    """
    Holds the style options that control how a C codegen AST node is rendered, as well as the current position in the
    tree (nesting depth and syntactic context).

    For safety, objects of this type are immutable. Nodes that need to render their children in an altered context
    (e.g. one indent level deeper) create an altered copy by calling `derive`, similar to how one would call `replace`
    for a named tuple. Siblings thus never see each other's adjustments.

    Attributes:
        indent_level: The current nesting depth. Each block entered adds 1.
        indent_type: Whether to indent with spaces or tabs
        indent_width: The number of columns per indent level. When indenting with tabs, every started group of 4
            columns becomes one tab.
        brace_style: The placement of braces around blocks
        newline_type: The line terminator to use
        syntactic_context: The kind of construct currently being rendered
        case_rules: The casing rules for identifiers in each role
    """

    indent_level: int = 0
    indent_type: IndentType = IndentType.SPACES
    indent_width: int = 4
    brace_style: BraceStyle = BraceStyle.ALLMAN
    newline_type: NewlineType = NewlineType.CRLF
    syntactic_context: SyntacticContext = SyntacticContext.FILE
    case_rules: CaseRules = CaseRules()

    def __post_init__(self):
        if self.indent_level < 0:
            raise ValueError(f"Indent level must be non-negative, got {self.indent_level}")
        if self.indent_width < 0:
            raise ValueError(f"Indent width must be non-negative, got {self.indent_width}")

    def derive(self, indent_level=None, indent_type=None, indent_width=None, brace_style=None, newline_type=None,
               syntactic_context=None, case_rules=None, add_indent=0):
        """
        Creates a modified copy of this rendering context (contexts are otherwise immutable).

        Args:
            indent_level: The new indent level (or None to leave it unchanged)
            indent_type: The new indent type (or None to leave it unchanged)
            indent_width: The new indent width (or None to leave it unchanged)
            brace_style: The new brace style (or None to leave it unchanged)
            newline_type: The new newline type (or None to leave it unchanged)
            syntactic_context: The new syntactic context (or None to leave it unchanged)
            case_rules: The new case rules (or None to leave them unchanged)
            add_indent: The number of levels to add to the indent level (a very common operation)

        Returns:
            A context with the modifications performed.
        """
        return CodegenContext(
            indent_level=_coalesce(self.indent_level, indent_level) + add_indent,
            indent_type=_coalesce(self.indent_type, indent_type),
            indent_width=_coalesce(self.indent_width, indent_width),
            brace_style=_coalesce(self.brace_style, brace_style),
            newline_type=_coalesce(self.newline_type, newline_type),
            syntactic_context=_coalesce(self.syntactic_context, syntactic_context),
            case_rules=_coalesce(self.case_rules, case_rules),
        )

    def indented(self, levels: int = 1) -> 'CodegenContext':
        return self.derive(add_indent=levels)

    def in_context(self, syntactic_context: SyntacticContext) -> 'CodegenContext':
        return self.derive(syntactic_context=syntactic_context)

    @property
    def newline(self) -> str:
        return self.newline_type.value

    @property
    def tabs_per_level(self) -> int:
        return (self.indent_width + 3) // 4

    def indent_text(self, level=None) -> str:
        """
        Returns the indentation text for the current indent level (or another level, if specified).
        """
        level = _coalesce(self.indent_level, level)

        if self.indent_type == IndentType.TABS:
            return '\t' * (self.tabs_per_level * level)

        return ' ' * (self.indent_width * level)

    def case_for_role(self, role: NameRole) -> CaseType:
        return self.case_rules.for_role(role)
