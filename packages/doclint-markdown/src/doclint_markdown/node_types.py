from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Node:
    """Base class for every node of a parsed markdown document"""

    line: Optional[int] = None
    children: Tuple["AnyNode", ...] = field(default_factory=tuple)

    @property
    def kind(self) -> str:
        return "node"


@dataclass(frozen=True)
class Document(Node):
    """Root of a parsed document"""

    @property
    def kind(self) -> str:
        return "root"


@dataclass(frozen=True)
class Heading(Node):
    """ATX or setext heading"""

    depth: int = 1

    @property
    def kind(self) -> str:
        return "heading"


@dataclass(frozen=True)
class Paragraph(Node):
    @property
    def kind(self) -> str:
        return "paragraph"


@dataclass(frozen=True)
class Text(Node):
    """Literal prose. The only node kind whose value counts as document text."""

    value: str = ""

    @property
    def kind(self) -> str:
        return "text"


@dataclass(frozen=True)
class Break(Node):
    """Hard line break"""

    @property
    def kind(self) -> str:
        return "break"


@dataclass(frozen=True)
class InlineCode(Node):
    value: str = ""

    @property
    def kind(self) -> str:
        return "inlineCode"


@dataclass(frozen=True)
class Code(Node):
    """Fenced or indented code block"""

    value: str = ""
    info: str = ""

    @property
    def kind(self) -> str:
        return "code"


@dataclass(frozen=True)
class Html(Node):
    value: str = ""

    @property
    def kind(self) -> str:
        return "html"


@dataclass(frozen=True)
class Image(Node):
    """Image; alt text is an attribute, not child text"""

    alt: str = ""
    src: str = ""

    @property
    def kind(self) -> str:
        return "image"


@dataclass(frozen=True)
class Container(Node):
    """Any other structural node (lists, quotes, emphasis, links, ...)"""

    type: str = "container"

    @property
    def kind(self) -> str:
        return self.type


AnyNode = Union[Document, Heading, Paragraph, Text, Break, InlineCode, Code, Html, Image, Container]


@dataclass
class ParseResult:
    """Result of parsing a markdown source"""

    tree: Document
    source: str
    path: Optional[str] = None
