import unittest

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext, CaseRules
from atmfjstc.lib.c_codegen.casing import CaseType
from atmfjstc.lib.c_codegen.styles import NameRole
from atmfjstc.lib.c_codegen.ast.names import Name, CasedText, name, with_role, as_identifier
from atmfjstc.lib.c_codegen.ast.raw import RawCode


CONTEXT = CodegenContext()


class NameTest(unittest.TestCase):
    def test_parse_canonicalizes(self):
        self.assertEqual(name('MY_Variable__name').parts, ('my', 'variable', 'name'))

    def test_default_role(self):
        self.assertEqual(name('my_variable_name').render(CONTEXT), 'my_variable_name')

    def test_default_case_override(self):
        context = CONTEXT.derive(case_rules=CaseRules(default_case=CaseType.PASCAL))

        self.assertEqual(name('my_variable_name').render(context), 'MyVariableName')

    def test_roles(self):
        self.assertEqual(name('my_thing', NameRole.TYPE).render(CONTEXT), 'MyThing')
        self.assertEqual(name('my_thing', NameRole.MEMBER).render(CONTEXT), 'my_thing')
        self.assertEqual(name('my_thing', NameRole.FUNCTION).render(CONTEXT), 'my_thing')
        self.assertEqual(name('my_thing', NameRole.CONST_DEFINE).render(CONTEXT), 'MY_THING')
        self.assertEqual(name('my_thing', NameRole.FILE_NAME).render(CONTEXT), 'MyThing')

    def test_same_name_different_contexts(self):
        node = name('my_thing', NameRole.FUNCTION)
        context = CONTEXT.derive(case_rules=CONTEXT.case_rules.derive(function_case=CaseType.CAMEL))

        self.assertEqual(node.render(CONTEXT), 'my_thing')
        self.assertEqual(node.render(context), 'myThing')

    def test_with_role_copies(self):
        node = name('my_thing')
        typed = node.with_role(NameRole.TYPE)

        self.assertEqual(node.role, NameRole.DEFAULT)
        self.assertEqual(typed.role, NameRole.TYPE)
        self.assertEqual(typed.parts, node.parts)
        self.assertIs(typed.with_role(NameRole.TYPE), typed)

    def test_pinned_case_wins_over_role(self):
        node = name('my_thing').with_case(CaseType.SCREAMING).with_role(NameRole.TYPE)

        self.assertEqual(node.render(CONTEXT), 'MYTHING')

    def test_empty_text_gives_placeholder(self):
        self.assertEqual(name('').render(CONTEXT), 'invalid_name')
        self.assertEqual(name('___').render(CONTEXT), 'invalid_name')

    def test_name_accepts_existing(self):
        node = name('my_thing')

        self.assertIs(name(node), node)
        self.assertEqual(name(node, NameRole.TYPE).role, NameRole.TYPE)

    def test_invalid_parts(self):
        with self.assertRaises(ValueError):
            Name(())
        with self.assertRaises(ValueError):
            Name(('my', 'Thing'))
        with self.assertRaises(ValueError):
            Name(('my', ''))

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            name('my_thing').parts = ('other',)


class CasedTextTest(unittest.TestCase):
    def test_embedded_capitals(self):
        self.assertEqual(CasedText('paramName').render(CONTEXT), 'param_name')

    def test_markers(self):
        node = CasedText('param`name', role=NameRole.TYPE)

        self.assertEqual(node.render(CONTEXT), 'ParamName')

    def test_role_and_pin(self):
        node = CasedText('paramName').with_role(NameRole.CONST_DEFINE)

        self.assertEqual(node.render(CONTEXT), 'PARAM_NAME')
        self.assertEqual(node.with_case(CaseType.CAMEL).render(CONTEXT), 'paramName')

    def test_rejects_multiline(self):
        with self.assertRaises(ValueError):
            CasedText('param\nname')


class HelpersTest(unittest.TestCase):
    def test_with_role_ignores_non_identifiers(self):
        node = RawCode('int')

        self.assertIs(with_role(node, NameRole.TYPE), node)

    def test_as_identifier(self):
        self.assertEqual(as_identifier('my_type', NameRole.TYPE).render(CONTEXT), 'MyType')
        self.assertEqual(as_identifier(RawCode('int'), NameRole.TYPE).render(CONTEXT), 'int')
        self.assertEqual(as_identifier(CasedText('myType'), NameRole.TYPE).render(CONTEXT), 'MyType')
