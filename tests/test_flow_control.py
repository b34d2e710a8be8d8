import unittest

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.presets import CodeStyle, from_style
from atmfjstc.lib.c_codegen.styles import BraceStyle, NewlineType, NameRole
from atmfjstc.lib.c_codegen.ast.block import body
from atmfjstc.lib.c_codegen.ast.flow_control import IfStatement, WhileStatement, ForLoop
from atmfjstc.lib.c_codegen.ast.names import name
from atmfjstc.lib.c_codegen.ast.raw import code


def _context(brace_style, **kwargs):
    return CodegenContext(brace_style=brace_style, newline_type=NewlineType.LF, **kwargs)


class IfStatementTest(unittest.TestCase):
    def test_gnu(self):
        node = IfStatement(code('x'), body('return 1;'))

        self.assertEqual(
            node.render(from_style(CodeStyle.GNU)),
            'if (x)\r\n{\r\n    return 1;\r\n  }'
        )

    def test_identifier_condition(self):
        node = IfStatement(name('IS_READY', NameRole.MEMBER), body('go();'))

        self.assertEqual(node.render(_context(BraceStyle.KNR)), 'if (is_ready) {\n    go();\n}')

    def test_else_knr(self):
        node = IfStatement(code('x'), body('a;'), else_body=body('b;'))

        self.assertEqual(node.render(_context(BraceStyle.KNR)), 'if (x) {\n    a;\n} else {\n    b;\n}')

    def test_else_allman(self):
        node = IfStatement(code('x'), body('a;'), else_body=body('b;'))

        self.assertEqual(
            node.render(_context(BraceStyle.ALLMAN, indent_level=1)),
            'if (x)\n    {\n        a;\n    }\n    else\n    {\n        b;\n    }'
        )

    def test_else_minimal(self):
        node = IfStatement(code('x'), body('a;'), else_body=body('b;'))

        self.assertEqual(node.render(from_style(CodeStyle.MINIMAL)), 'if (x){a;}else{b;}')

    def test_else_none_style_with_newlines(self):
        node = IfStatement(code('x'), body('a;'), else_body=body('b;'))

        self.assertEqual(node.render(_context(BraceStyle.NONE)), 'if (x){a;}else{b;}')

    def test_body_is_required(self):
        with self.assertRaises(ValueError):
            IfStatement(code('x'), code('a;'))


class LoopsTest(unittest.TestCase):
    def test_while(self):
        node = WhileStatement(code('i < n'), body('i++;'))

        self.assertEqual(node.render(_context(BraceStyle.KNR)), 'while (i < n) {\n    i++;\n}')

    def test_for(self):
        node = ForLoop(code('int i = 0'), code('i < n'), code('i++'), body('f(i);'))

        self.assertEqual(node.render(_context(BraceStyle.KNR)), 'for (int i = 0; i < n; i++) {\n    f(i);\n}')

    def test_for_allman(self):
        node = ForLoop(code('int i = 0'), code('i < n'), code('i++'), body('f(i);'))

        self.assertEqual(
            node.render(_context(BraceStyle.ALLMAN)),
            'for (int i = 0; i < n; i++)\n{\n    f(i);\n}'
        )
