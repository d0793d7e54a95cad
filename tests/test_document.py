"""Test the line buffer: loading, editing and serialization."""

import pytest
from levorg.document import Document, split_lines


def test_load_empty_text_gives_one_empty_line():
    doc = Document.load("")
    assert doc.lines == [""]
    assert doc.line_count == 1


def test_load_trailing_newline_adds_no_extra_line():
    """'x\\ny\\n' loads as two lines and serializes without the trailing newline."""
    doc = Document.load("x\ny\n")
    assert doc.lines == ["x", "y"]
    assert doc.serialize() == "x\ny"


def test_load_keeps_inner_blank_lines():
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("a\n\n") == ["a", ""]
    assert split_lines("\n") == [""]


def test_load_strips_carriage_return_of_crlf():
    assert split_lines("a\r\nb\r\n") == ["a", "b"]
    # A lone carriage return is text
    assert split_lines("a\rb") == ["a\rb"]


def test_trailing_carriage_return_without_newline_is_kept():
    assert split_lines("a\nb\r") == ["a", "b\r"]
    doc = Document.load("a\r")
    assert doc.lines == ["a\r"]
    assert doc.serialize() == "a\r"


def test_loaded_document_is_clean():
    doc = Document.load("hello")
    assert doc.dirty == False


def test_insert_char_middle_and_end():
    doc = Document(["hllo"])
    doc.insert_char(0, 1, "e")
    assert doc.lines == ["hello"]
    doc.insert_char(0, 5, "!")
    assert doc.lines == ["hello!"]
    assert doc.dirty == True


def test_delete_backward_within_line():
    doc = Document(["abc"])
    assert doc.delete_backward(0, 2) == (0, 1)
    assert doc.lines == ["ac"]
    assert doc.dirty == True


def test_delete_backward_merges_with_previous_line():
    doc = Document(["ab", "cd"])
    assert doc.delete_backward(1, 0) == (0, 2)
    assert doc.lines == ["abcd"]
    assert doc.line_count == 1


def test_delete_backward_at_document_start_is_noop():
    doc = Document(["abc", "def"])
    assert doc.delete_backward(0, 0) == (0, 0)
    assert doc.lines == ["abc", "def"]
    assert doc.dirty == False


def test_split_line_at_end_creates_empty_line():
    doc = Document(["hello"])
    assert doc.split_line(0, 5) == (1, 0)
    assert doc.lines == ["hello", ""]
    assert doc.dirty == True


def test_split_line_in_middle():
    doc = Document(["first", "hello world", "last"])
    assert doc.split_line(1, 5) == (2, 0)
    assert doc.lines == ["first", "hello", " world", "last"]


def test_split_empty_document():
    doc = Document()
    doc.split_line(0, 0)
    assert doc.lines == ["", ""]


@pytest.mark.parametrize("line,col", [("", 0), ("abc", 0), ("abc", 1), ("abc", 3)])
def test_insert_then_delete_restores_line(line, col):
    doc = Document([line])
    doc.insert_char(0, col, "x")
    assert doc.delete_backward(0, col + 1) == (0, col)
    assert doc.lines == [line]


@pytest.mark.parametrize("col", [0, 2, 5])
def test_split_then_merge_restores_line(col):
    doc = Document(["above", "hello", "below"])
    row, new_col = doc.split_line(1, col)
    assert doc.delete_backward(row, new_col) == (1, col)
    assert doc.lines == ["above", "hello", "below"]
    assert doc.line_count == 3


def test_mark_saved_clears_dirty():
    doc = Document(["a"])
    doc.insert_char(0, 0, "b")
    doc.mark_saved()
    assert doc.dirty == False


def test_lines_returns_a_copy():
    doc = Document(["a"])
    doc.lines.append("b")
    assert doc.line_count == 1


def test_serialize_unicode():
    doc = Document(["Hello 世界", "Café"])
    assert doc.serialize() == "Hello 世界\nCafé"
