import pytest
from lsprotocol.types import CompletionParams, HoverParams, Position, TextDocumentIdentifier

from egg_lsp.indexer import BUILTIN_SIGNATURES, build_index
from egg_lsp.server import DocumentState, _extract_word_at, ls, on_completion, on_hover

URI = "file:///tmp/test.egg"
TEXT = "do(define(total, 0),\n   print(+(total, 1)))"


@pytest.fixture
def document():
    ls.documents[URI] = DocumentState(text=TEXT, index=build_index(TEXT))
    yield
    ls.documents.pop(URI, None)


def hover_at(line, character):
    return on_hover(HoverParams(
        text_document=TextDocumentIdentifier(uri=URI),
        position=Position(line=line, character=character),
    ))


@pytest.mark.parametrize(
    "line,character,expected",
    [
        (0, 0, "do"),
        (0, 1, "do"),
        (0, 12, "total"),
        (1, 6, "print"),
        (1, 9, "+"),
        (0, 2, "do"),
        (5, 0, None),
    ],
)
def test_extract_word_at(line, character, expected):
    assert _extract_word_at(TEXT, Position(line=line, character=character)) == expected


def test_extract_word_at_separator_between_words():
    assert _extract_word_at("f( , )", Position(line=0, character=3)) is None


def test_hover_on_builtin(document):
    hover = hover_at(1, 4)
    assert hover.contents.value == BUILTIN_SIGNATURES["print"]


def test_hover_on_definition(document):
    hover = hover_at(1, 13)
    assert hover.contents.value == "total: var (defined at 1:11)"


def test_hover_on_unknown_word(document):
    assert hover_at(0, 17) is None


def test_hover_without_document():
    ls.documents.pop(URI, None)
    assert hover_at(0, 0) is None


def test_completion_lists_builtins_and_definitions(document):
    result = on_completion(CompletionParams(
        text_document=TextDocumentIdentifier(uri=URI),
        position=Position(line=0, character=0),
    ))
    labels = {item.label for item in result.items}
    assert set(BUILTIN_SIGNATURES) <= labels
    assert "total" in labels
