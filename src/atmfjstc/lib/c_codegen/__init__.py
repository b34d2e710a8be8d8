"""
Renders a structured description of C code (functions, ifs, loops, structs, identifiers, literal text) into source text,
in any of several configurable "house styles".

Rationale
---------

Programs that generate C code (bindings, register maps, protocol tables etc.) are often required to match the
conventions of the project they generate code for. One project wants Allman braces and 4-space indents, another wants
K&R braces, tabs and Unix newlines, a third wants GNU style. Identifiers are a similar story: the same struct member may
have to come out as ``my_field`` in one codebase and ``myField`` in another.

If the generator writes text directly, every such convention leaks into every rendering function. Instead, with this
package, you describe the code as a tree of nodes from `atmfjstc.lib.c_codegen.ast.*`, and the style is decided only
at render time by a `CodegenContext`. The same tree renders into visually distinct outputs without any change.

Components
----------

- `CodegenContext`: the immutable style configuration (indent type and width, brace style, newline type, casing rules),
  together with the current indent level and syntactic context. Named presets live in `presets`.
- `casing`: turns canonical identifiers (lowercase word fragments) into camelCase, PascalCase, snake_case etc.
- `ast.base`: the render protocol shared by all nodes.
- `ast.raw`, `ast.structural`: literal text and the sequence combinators used to assemble other nodes.
- `ast.block`: lays out braced blocks according to the brace style.
- `ast.names`: identifiers that are cased according to their role (type, member, function, constant...).
- `ast.flow_control`, `ast.functions`, `ast.data_types`, `ast.files`: the C constructs themselves.


Example
-------

::

    fn = Function(
        signature(code('int'), 'ADD', [(code('int'), 'a'), (code('int'), 'b')]),
        body('return a + b;'),
    )

    print(fn.render(from_style(CodeStyle.ALLMAN, newline_type=NewlineType.LF)))
    print(fn.render(from_style(CodeStyle.KNR, newline_type=NewlineType.LF)))

Result::

    int add(int a, int b)
    {
        return a + b;
    }
    int add(int a, int b) {
        return a + b;
    }
"""
