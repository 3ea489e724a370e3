import pytest

from docgrep.models import Document, FieldWeights, split_lines


def test_split_lines_drops_blank_and_whitespace_lines_in_order() -> None:
    text = "first\n\n   \n\tsecond line \r\nthird\n"
    assert split_lines(text) == ("first", "\tsecond line ", "third")


def test_document_from_text_derives_id_title_and_lines() -> None:
    doc = Document.from_text("report.final.pdf", "The quick fox\nJumps high\n")

    assert doc.id == "report.final.pdf"
    assert doc.title == "report.final"
    assert doc.body == "The quick fox\nJumps high\n"
    assert doc.lines == ("The quick fox", "Jumps high")


def test_document_is_immutable() -> None:
    doc = Document.from_text("a.txt", "x")
    with pytest.raises(AttributeError):
        doc.body = "changed"  # type: ignore[misc]


def test_field_weights_defaults_and_boosts() -> None:
    assert FieldWeights().as_boosts() == {"title": 1.0, "body": 2.0, "lines": 3.0}


def test_field_weights_reject_negative() -> None:
    with pytest.raises(ValueError):
        FieldWeights(body=-1.0)
