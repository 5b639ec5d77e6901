import pytest
from doclint_markdown import (
    ASTWalker,
    Break,
    Code,
    Heading,
    Image,
    InlineCode,
    MarkdownParser,
    Paragraph,
    ParseError,
    Text,
    parse,
)


def test_heading_and_paragraph_lines():
    tree = parse("# Title\n\nSome *emphasis* text.\n")

    assert isinstance(tree.children[0], Heading)
    assert isinstance(tree.children[1], Paragraph)
    assert tree.children[0].line == 1
    assert tree.children[0].depth == 1
    assert tree.children[1].line == 3


def test_get_text_skips_formatting_nodes():
    tree = parse("Some *emphasis* and **strong** text.\n")

    paragraph = ASTWalker.paragraphs(tree)[0]
    assert ASTWalker.get_text(paragraph) == "Some emphasis and strong text."


def test_get_text_excludes_inline_code():
    tree = parse("Use `foo` here\n")

    paragraph = ASTWalker.paragraphs(tree)[0]
    assert ASTWalker.find_all(paragraph, InlineCode)[0].value == "foo"
    assert ASTWalker.get_text(paragraph) == "Use  here"


def test_softbreak_keeps_newline_in_text():
    tree = parse("line one\nline two\n")

    assert ASTWalker.get_text(tree) == "line one\nline two"


def test_hard_break_is_not_text():
    tree = parse("foo  \nbar\n")

    paragraph = ASTWalker.paragraphs(tree)[0]
    assert any(isinstance(child, Break) for child in paragraph.children)
    assert ASTWalker.get_text(paragraph) == "foobar"


def test_setext_heading():
    tree = parse("Title\n=====\n\nSub\n---\n")

    headings = ASTWalker.headings(tree)
    assert [h.depth for h in headings] == [1, 2]
    assert [h.line for h in headings] == [1, 4]


def test_list_item_paragraphs_are_found():
    tree = parse("- item one\n- item two\n")

    paragraphs = ASTWalker.paragraphs(tree)
    assert [ASTWalker.get_text(p) for p in paragraphs] == ["item one", "item two"]
    assert [p.line for p in paragraphs] == [1, 2]


def test_code_block_has_no_text():
    tree = parse("```python\nprint('hi')\n```\n")

    code = ASTWalker.find_all(tree, Code)[0]
    assert code.info == "python"
    assert code.value == "print('hi')\n"
    assert ASTWalker.get_text(tree) == ""


def test_image_alt_is_not_text():
    tree = parse("![alt text](img.png)\n")

    image = ASTWalker.find_all(tree, Image)[0]
    assert image.alt == "alt text"
    assert image.src == "img.png"
    assert ASTWalker.get_text(tree) == ""


def test_inline_text_nodes_have_no_position():
    tree = parse("# Title\n")

    text = ASTWalker.find_all(tree, Text)[0]
    assert text.line is None
    assert ASTWalker.get_line(text) == 0


def test_find_all_preserves_document_order():
    tree = parse("# One\n\npara\n\n## Two\n\n> quoted para\n")

    nodes = ASTWalker.find_all(tree, (Paragraph, Heading))
    assert [ASTWalker.get_text(n) for n in nodes] == ["One", "para", "Two", "quoted para"]


def test_tree_is_immutable():
    tree = parse("# Title\n")

    with pytest.raises(AttributeError):
        tree.children[0].line = 5


def test_parse_rejects_non_text():
    parser = MarkdownParser()

    with pytest.raises(ParseError):
        parser.parse_string(b"# bytes")


def test_parse_file_rejects_invalid_utf8(tmp_path):
    file_path = tmp_path / "bad.md"
    file_path.write_bytes(b"# Title\n\n\xff\xfe broken\n")

    with pytest.raises(ParseError):
        MarkdownParser().parse_file(file_path)


def test_parse_file(tmp_path):
    file_path = tmp_path / "doc.md"
    file_path.write_text("# Title\n\nBody.\n", encoding="utf-8")

    result = MarkdownParser().parse_file(file_path)
    assert result.path == str(file_path)
    assert len(ASTWalker.headings(result.tree)) == 1
