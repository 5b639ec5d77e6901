from typing import Iterator, List, Tuple, Type, TypeVar, Union

from .node_types import Heading, Node, Paragraph, Text

N = TypeVar("N", bound=Node)


class ASTWalker:
    """Utilities for traversing and searching the markdown document tree"""

    @staticmethod
    def iter_nodes(node: Node) -> Iterator[Node]:
        """Yield every node of the subtree in document order"""
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    @staticmethod
    def find_all(node: Node, node_type: Union[Type[N], Tuple[Type[Node], ...]]) -> List[N]:
        """Find all nodes of the given type(s) in the subtree, in document order.

        The starting node itself is included when it matches.
        """
        return [n for n in ASTWalker.iter_nodes(node) if isinstance(n, node_type)]

    @staticmethod
    def headings(node: Node) -> List[Heading]:
        return ASTWalker.find_all(node, Heading)

    @staticmethod
    def paragraphs(node: Node) -> List[Paragraph]:
        return ASTWalker.find_all(node, Paragraph)

    @staticmethod
    def get_text(node: Node) -> str:
        """Concatenate the value of every Text leaf below node.

        No separators are inserted; formatting nodes contribute only the text
        they wrap, and code, html and image alt text contribute nothing.
        """
        return "".join(n.value for n in ASTWalker.iter_nodes(node) if isinstance(n, Text))

    @staticmethod
    def get_line(node: Node) -> int:
        """Start line of node, or 0 if the position is unknown"""
        return node.line or 0
