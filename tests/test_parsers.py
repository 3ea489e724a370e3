from pathlib import Path

import pytest

from docgrep.exceptions import ParsingError
from docgrep.parsers import HTMLParser, MarkdownParser, ParserRegistry, TextParser


def test_html_parser_keeps_blocks_on_separate_lines() -> None:
    html = (
        "<html><head><style>p {color: red}</style></head><body>"
        "<h1>Guide</h1><p>Install the package</p>"
        "<script>var hidden = 1;</script><ul><li>one</li><li>two</li></ul>"
        "</body></html>"
    )
    doc = HTMLParser().parse_html_content(html)

    assert doc.text.splitlines() == ["Guide", "Install the package", "one", "two"]
    assert "hidden" not in doc.text


def test_markdown_parser_extracts_text_lines() -> None:
    content = "# Title\n\nSome *emphasis* here.\n\n- item one\n- item two\n"
    doc = MarkdownParser().parse_markdown_content(content)
    lines = doc.text.splitlines()

    assert lines[0] == "Title"
    assert "Some emphasis here." in lines
    assert "item one" in lines
    assert "item two" in lines


def test_text_parser_returns_content_verbatim(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("a\n\nb\n", encoding="utf-8")

    doc = TextParser().parse(path)

    assert doc.text == "a\n\nb\n"
    assert doc.metadata["source_path"] == str(path)


def test_registry_dispatches_by_extension() -> None:
    registry = ParserRegistry()
    assert isinstance(registry.parser_for(Path("x.MD")), MarkdownParser)
    assert isinstance(registry.parser_for(Path("x.htm")), HTMLParser)
    assert registry.parser_for(Path("x.docx")) is None


def test_registry_rejects_unsupported_file(tmp_path: Path) -> None:
    path = tmp_path / "sheet.xlsx"
    path.write_bytes(b"PK")
    with pytest.raises(ParsingError):
        ParserRegistry().parse(path)


def test_registry_wraps_decode_errors(tmp_path: Path) -> None:
    path = tmp_path / "broken.txt"
    path.write_bytes(b"\xff\xfe\xfa not utf-8")

    with pytest.raises(ParsingError) as exc_info:
        ParserRegistry().parse(path)

    assert "broken.txt" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_registry_wraps_corrupt_pdf(tmp_path: Path) -> None:
    path = tmp_path / "corrupt.pdf"
    path.write_bytes(b"this is not a pdf document at all")

    with pytest.raises(ParsingError):
        ParserRegistry().parse(path)
