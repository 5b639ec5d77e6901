"""Adapter from markdown-it-py's token stream to the doclint document tree."""

from pathlib import Path
from typing import List, Optional, Union

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .node_types import (
    AnyNode,
    Break,
    Code,
    Container,
    Document,
    Heading,
    Html,
    Image,
    InlineCode,
    Paragraph,
    ParseResult,
    Text,
)


class ParseError(Exception):
    """Raised when a source cannot be turned into a document tree"""


class MarkdownParser:
    """CommonMark parser producing immutable document trees"""

    def __init__(self):
        self._md = MarkdownIt("commonmark")

    def parse_string(self, source: str, path: Optional[str] = None) -> ParseResult:
        if not isinstance(source, str):
            raise ParseError(f"Expected markdown text, got {type(source).__name__}")
        try:
            tokens = self._md.parse(source)
        except Exception as e:
            raise ParseError(f"Failed to parse {path or '<string>'}: {e}") from e

        root = SyntaxTreeNode(tokens)
        tree = Document(line=1, children=tuple(self._convert_children(root)))
        return ParseResult(tree=tree, source=source, path=path)

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """Read and parse a UTF-8 markdown file.

        OSError from reading propagates unchanged; undecodable content is a
        ParseError.
        """
        file_path = Path(file_path)
        raw = file_path.read_bytes()
        try:
            source = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"{file_path} is not valid UTF-8: {e}") from e
        return self.parse_string(source, path=str(file_path))

    def _convert_children(self, node: SyntaxTreeNode) -> List[AnyNode]:
        converted: List[AnyNode] = []
        for child in node.children:
            if child.type == "inline":
                # inline wrappers are flattened into their block
                converted.extend(self._convert_children(child))
            else:
                converted.append(self._convert(child))
        return converted

    def _convert(self, node: SyntaxTreeNode) -> AnyNode:
        line = node.map[0] + 1 if node.map else None
        t = node.type

        if t == "text":
            return Text(line=line, value=node.content)
        if t == "softbreak":
            return Text(line=line, value="\n")
        if t == "hardbreak":
            return Break(line=line)
        if t == "code_inline":
            return InlineCode(line=line, value=node.content)
        if t in ("fence", "code_block"):
            return Code(line=line, value=node.content, info=node.info or "")
        if t in ("html_block", "html_inline"):
            return Html(line=line, value=node.content)
        if t == "image":
            return Image(line=line, alt=node.content, src=str(node.attrs.get("src", "")))

        children = tuple(self._convert_children(node))
        if t == "heading":
            return Heading(line=line, children=children, depth=int(node.tag[1:]))
        if t == "paragraph":
            return Paragraph(line=line, children=children)
        return Container(line=line, children=children, type=t)


def parse(source: str) -> Document:
    """Parse markdown text into a Document, raising ParseError on failure"""
    return MarkdownParser().parse_string(source).tree
