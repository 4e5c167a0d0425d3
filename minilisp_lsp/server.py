"""
A minimal pygls-based Language Server for minilisp.

Features:
- Text synchronization (documents are held by the pygls workspace)
- Diagnostics: reader errors, reported at the offending character
- Hover: builtin signatures and `let` definitions in the buffer
- Completion: builtins, special forms and `let` definitions
- Document Symbols: from the indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from minilisp import __version__
from minilisp_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex, build_index

logger = logging.getLogger(__name__)


class MinilispLanguageServer(LanguageServer):
    CMD_NAME = "minilisp-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.indexes: Dict[str, DocumentIndex] = {}


ls = MinilispLanguageServer()


def _reindex(ls: MinilispLanguageServer, uri: str) -> None:
    text = ls.workspace.get_text_document(uri).source
    idx = build_index(text)
    ls.indexes[uri] = idx
    logger.debug("indexed %s: %d definition(s)", uri, len(idx.symbols))
    ls.publish_diagnostics(uri, diagnostics_for(idx))


def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    if idx.error is None:
        return []
    err = idx.error
    return [
        Diagnostic(
            range=Range(
                start=Position(line=err.line, character=err.col),
                end=Position(line=err.line, character=err.col + 1),
            ),
            message=err.message,
            severity=DiagnosticSeverity.Error,
            source=MinilispLanguageServer.CMD_NAME,
        )
    ]


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: MinilispLanguageServer, params: DidOpenTextDocumentParams):
    _reindex(ls, params.text_document.uri)


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: MinilispLanguageServer, params: DidChangeTextDocumentParams):
    _reindex(ls, params.text_document.uri)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: MinilispLanguageServer, params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.indexes.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(ls: MinilispLanguageServer, params: HoverParams) -> Optional[Hover]:
    idx = ls.indexes.get(params.text_document.uri)
    if idx is None:
        return None
    text = ls.workspace.get_text_document(params.text_document.uri).source
    word = word_at(text, params.position.line, params.position.character)
    if not word:
        return None

    contents = hover_text(idx, word)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


def hover_text(idx: DocumentIndex, word: str) -> Optional[str]:
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    sdef = idx.symbols.get(word)
    if sdef is None:
        return None
    if sdef.kind == "function":
        return f"(lambda ({sdef.params}) ...) defined at {sdef.line + 1}:{sdef.col + 1}"
    return f"{word}: {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(ls: MinilispLanguageServer, params: CompletionParams) -> CompletionList:
    items: List[CompletionItem] = []
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    idx = ls.indexes.get(params.text_document.uri)
    if idx is not None:
        for name, sdef in idx.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(
    ls: MinilispLanguageServer, params: DocumentSymbolParams
) -> Optional[List[DocumentSymbol]]:
    idx = ls.indexes.get(params.text_document.uri)
    if idx is None:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in idx.symbols.items():
        rng = Range(
            start=Position(line=sdef.line, character=sdef.col),
            end=Position(line=sdef.line, character=sdef.col + len(name)),
        )
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---
def word_at(text: str, line: int, character: int) -> Optional[str]:
    lines = text.splitlines(True)
    if line >= len(lines):
        return None
    row = lines[line]
    start = character
    while start > 0 and row[start - 1].isalpha():
        start -= 1
    end = character
    while end < len(row) and row[end].isalpha():
        end += 1
    return row[start:end] or None


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
