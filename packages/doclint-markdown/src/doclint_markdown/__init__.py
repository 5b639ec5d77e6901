"""Typed markdown document trees built on markdown-it-py."""

from .ast_walker import ASTWalker
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
    Node,
    Paragraph,
    ParseResult,
    Text,
)
from .parser import MarkdownParser, ParseError, parse

__all__ = [
    "ASTWalker",
    "AnyNode",
    "Break",
    "Code",
    "Container",
    "Document",
    "Heading",
    "Html",
    "Image",
    "InlineCode",
    "MarkdownParser",
    "Node",
    "Paragraph",
    "ParseError",
    "ParseResult",
    "Text",
    "parse",
]
