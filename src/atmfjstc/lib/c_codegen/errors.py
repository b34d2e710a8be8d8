from atmfjstc.lib.c_codegen.styles import BraceStyle


class CodegenError(Exception):
    """
    Base class for all exceptions thrown while rendering C code.
    """


class UnsupportedStyleError(CodegenError):
    style: BraceStyle

    def __init__(self, style: BraceStyle):
        super().__init__(f"Brace style '{style.name}' is not supported yet")

        self.style = style
