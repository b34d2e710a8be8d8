from abc import ABCMeta, abstractmethod
from typing import Iterable, TextIO

from atmfjstc.lib.ast import ASTNode

from atmfjstc.lib.c_codegen.CodegenContext import CodegenContext


class AbstractCodegenASTNode(ASTNode, metaclass=ABCMeta):
    """
    Base class for all AST nodes used to describe the structure of the generated C code.
    """
    AST_NODE_CONFIG = ('abstract',)

    @abstractmethod
    def render_chunks(self, context: CodegenContext) -> Iterable[str]:
        """
        Renders this node (i.e. converts it to text) within a given context (indent level, brace style etc.)

        The rendering is done lazily, chunk by chunk. If rendering fails (e.g. due to an unsupported brace style), the
        exception is raised at the point where the offending node is reached, and no further chunks are produced.

        Args:
            context: A CodegenContext object containing the style options and the current indent level

        Returns:
            The generated text for this node, as a stream of chunks. Newlines are embedded in the chunks, in the style
            specified by the context.
        """
        raise NotImplementedError

    def render(self, context: CodegenContext) -> str:
        """
        Renders this node to a single string. See `render_chunks` for details.
        """
        return ''.join(self.render_chunks(context))

    def write_to(self, sink: TextIO, context: CodegenContext):
        """
        Renders this node directly into a text sink (file, `io.StringIO` etc).

        Chunks are written as soon as they are produced. Errors thrown by the sink are propagated immediately and abort
        the rendering; in that case, whatever was already written should be discarded.
        """
        for chunk in self.render_chunks(context):
            sink.write(chunk)
