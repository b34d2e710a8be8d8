import re
import unittest

from io import StringIO

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext
from atmfjstc.lib.c_codegen.errors import UnsupportedStyleError, CodegenError
from atmfjstc.lib.c_codegen.presets import CodeStyle, from_style
from atmfjstc.lib.c_codegen.styles import BraceStyle, NewlineType, IndentType, SyntacticContext
from atmfjstc.lib.c_codegen.ast.block import CodeBody, HeaderPlusBody, SUPPORTED_BRACE_STYLES, body
from atmfjstc.lib.c_codegen.ast.flow_control import IfStatement
from atmfjstc.lib.c_codegen.ast.functions import Function, signature
from atmfjstc.lib.c_codegen.ast.raw import RawCode, code
from atmfjstc.lib.c_codegen.ast.structural import NullNode


def _context(brace_style, **kwargs):
    return CodegenContext(brace_style=brace_style, newline_type=NewlineType.LF, **kwargs)


def _block(*statements):
    return HeaderPlusBody(RawCode('header'), body(*statements))


def _nested():
    return Function(
        signature(code('void'), 'run'),
        CodeBody((IfStatement(code('x'), body('y();')), RawCode('z;'))),
    )


class BraceStylesTest(unittest.TestCase):
    def test_allman(self):
        self.assertEqual(_block('a;', 'b;').render(_context(BraceStyle.ALLMAN)), 'header\n{\n    a;\n    b;\n}')

    def test_allman_indented(self):
        self.assertEqual(
            _block('a;', 'b;').render(_context(BraceStyle.ALLMAN, indent_level=1)),
            'header\n    {\n        a;\n        b;\n    }'
        )

    def test_knr(self):
        self.assertEqual(_block('a;', 'b;').render(_context(BraceStyle.KNR)), 'header {\n    a;\n    b;\n}')

    def test_gnu(self):
        self.assertEqual(
            _block('a;', 'b;').render(_context(BraceStyle.GNU, indent_width=2)),
            'header\n{\n    a;\n    b;\n  }'
        )

    def test_gnu_function_body(self):
        context = _context(BraceStyle.GNU, indent_width=2, syntactic_context=SyntacticContext.FUNCTION)

        self.assertEqual(_block('a;', 'b;').render(context), 'header\n{\n    a;\n    b;\n}')

    def test_horstmann(self):
        self.assertEqual(_block('a;', 'b;').render(_context(BraceStyle.HORSTMANN)), 'header\n{   a;\n    b;\n}')

    def test_pico(self):
        self.assertEqual(_block('a;', 'b;').render(_context(BraceStyle.PICO)), 'header\n{   a;\n    b; }')

    def test_none(self):
        context = from_style(CodeStyle.MINIMAL)

        self.assertEqual(_block('a;', 'b;').render(context), 'header{a;b;}')

    def test_none_packs_statements_regardless_of_newline_and_indent(self):
        context = _context(BraceStyle.NONE, indent_width=4)

        self.assertEqual(_block('a;', 'b;').render(context), 'header{a;b;}')
        self.assertEqual(_nested().render(context), 'void run(){if (x){y();}z;}')

    def test_empty_bodies(self):
        expected = {
            BraceStyle.ALLMAN: 'header\n{\n}',
            BraceStyle.KNR: 'header {\n}',
            BraceStyle.GNU: 'header\n{\n    }',
            BraceStyle.HORSTMANN: 'header\n{\n}',
            BraceStyle.PICO: 'header\n{ }',
            BraceStyle.NONE: 'header{}',
        }

        for style, text in expected.items():
            with self.subTest(style=style):
                self.assertEqual(_block().render(_context(style)), text)

    def test_null_statements_are_ignored(self):
        node = HeaderPlusBody(RawCode('header'), CodeBody((NullNode(),)))

        self.assertEqual(node.render(_context(BraceStyle.KNR)), 'header {\n}')

    def test_bare_body(self):
        self.assertEqual(body('a;').render(_context(BraceStyle.KNR)), '{\n    a;\n}')
        self.assertEqual(body('a;').render(_context(BraceStyle.ALLMAN)), '{\n    a;\n}')

    def test_crlf(self):
        self.assertEqual(_block('a;').render(CodegenContext(brace_style=BraceStyle.KNR)), 'header {\r\n    a;\r\n}')


class FirstStatementPadTest(unittest.TestCase):
    def test_tabs(self):
        context = _context(BraceStyle.HORSTMANN, indent_type=IndentType.TABS)

        self.assertEqual(_block('a;', 'b;').render(context), 'header\n{\ta;\n\tb;\n}')

    def test_narrow_spaces(self):
        self.assertEqual(
            _block('a;', 'b;').render(_context(BraceStyle.HORSTMANN, indent_width=1)),
            'header\n{ a;\n b;\n}'
        )
        self.assertEqual(
            _block('a;', 'b;').render(_context(BraceStyle.HORSTMANN, indent_width=0)),
            'header\n{ a;\nb;\n}'
        )


class NestingTest(unittest.TestCase):
    def test_knr(self):
        self.assertEqual(
            _nested().render(_context(BraceStyle.KNR)),
            'void run() {\n    if (x) {\n        y();\n    }\n    z;\n}'
        )

    def test_allman(self):
        self.assertEqual(
            _nested().render(_context(BraceStyle.ALLMAN)),
            'void run()\n{\n    if (x)\n    {\n        y();\n    }\n    z;\n}'
        )

    def test_gnu(self):
        self.assertEqual(
            _nested().render(_context(BraceStyle.GNU, indent_width=2)),
            'void run()\n{\n    if (x)\n    {\n        y();\n      }\n    z;\n}'
        )

    def test_deterministic(self):
        context = _context(BraceStyle.PICO)

        self.assertEqual(_nested().render(context), _nested().render(context))

    def test_styles_differ_only_in_whitespace(self):
        stripped = set()
        for style in SUPPORTED_BRACE_STYLES:
            stripped.add(re.sub(r'\s', '', _nested().render(_context(style))))

        self.assertEqual(stripped, {'voidrun(){if(x){y();}z;}'})


class ReservedStylesTest(unittest.TestCase):
    def test_reserved_styles_raise(self):
        for style in (BraceStyle.WHITESMITHS, BraceStyle.RATLIFF, BraceStyle.LISP):
            with self.subTest(style=style):
                with self.assertRaises(UnsupportedStyleError) as cm:
                    _block('a;').render(_context(style))

                self.assertEqual(cm.exception.style, style)
                self.assertIsInstance(cm.exception, CodegenError)

    def test_nothing_written_before_error(self):
        sink = StringIO()

        with self.assertRaises(UnsupportedStyleError):
            _block('a;').write_to(sink, from_style(CodeStyle.WHITESMITHS))

        self.assertEqual(sink.getvalue(), '')

    def test_logs_refusal(self):
        with self.assertLogs('atmfjstc.lib.c_codegen.ast.block', level='DEBUG'):
            with self.assertRaises(UnsupportedStyleError):
                _block().render(_context(BraceStyle.LISP))

    def test_supported_styles(self):
        self.assertEqual(
            SUPPORTED_BRACE_STYLES,
            {BraceStyle.ALLMAN, BraceStyle.GNU, BraceStyle.KNR, BraceStyle.HORSTMANN, BraceStyle.PICO, BraceStyle.NONE}
        )
