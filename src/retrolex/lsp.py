"""Minimal LSP server for retrolex — semantic tokens only."""

from __future__ import annotations

import argparse
import logging
import sys

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    TEXT_DOCUMENT_SEMANTIC_TOKENS_RANGE,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    SemanticTokensRangeParams,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from retrolex import __version__
from retrolex.dialects import DIALECTS, DialectDescriptor
from retrolex.errors import UnknownPlatform
from retrolex.modes import (
    DEFAULT_PLATFORM,
    MODE_AWARE_LANGUAGES,
    Platform,
    detect_language,
    resolve_dialect_or_plain,
    resolve_language,
    resolve_platform,
)
from retrolex.session import BufferSession
from retrolex.tokens import Category

logger = logging.getLogger(__name__)

TOKEN_TYPES = [c.value for c in Category if c is not Category.NONE]
LEGEND = SemanticTokensLegend(token_types=TOKEN_TYPES, token_modifiers=[])
_TYPE_INDEX = {Category(name): i for i, name in enumerate(TOKEN_TYPES)}

# Lines tokenized around a requested range to warm the state cache.
RANGE_MARGIN = 20


class DocumentStore:
    """One BufferSession per open document URI."""

    def __init__(self, platform: Platform) -> None:
        self.platform = platform
        self._sessions: dict[str, BufferSession] = {}

    def dialect_for(self, uri: str, language_id: str | None = None) -> DialectDescriptor:
        language = (language_id or "").strip().lower()
        if language not in DIALECTS and language not in MODE_AWARE_LANGUAGES:
            language = detect_language(uri.rsplit("/", 1)[-1])
        return resolve_dialect_or_plain(resolve_language(language, self.platform))

    def open(self, uri: str, text: str, language_id: str | None = None) -> BufferSession:
        dialect = self.dialect_for(uri, language_id)
        logger.debug("open %s as %s", uri, dialect.name)
        session = BufferSession(dialect, text)
        self._sessions[uri] = session
        return session

    def update(self, uri: str, text: str, language_id: str | None = None) -> BufferSession:
        session = self._sessions.get(uri)
        if session is None:
            return self.open(uri, text, language_id)
        session.set_text(text)
        return session

    def close(self, uri: str) -> None:
        self._sessions.pop(uri, None)

    def get(self, uri: str) -> BufferSession | None:
        return self._sessions.get(uri)


store = DocumentStore(resolve_platform(DEFAULT_PLATFORM))

server = LanguageServer(
    "retrolex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_offset(line: str, offset: int) -> int:
    if line.isascii():
        return offset
    return len(line[:offset].encode("utf-16-le")) // 2


def encode_semantic_tokens(
    session: BufferSession, start: int = 0, stop: int | None = None, margin: int = 0
) -> list[int]:
    """Encode the spans of lines [start, stop) as LSP relative semantic-token data.

    Lines within *margin* of the range are tokenized too, so their start
    states are cached for scrolling, but are not encoded. Deltas are
    relative to the top of the document, as the protocol requires for
    range requests.
    """
    stop = session.line_count if stop is None else min(stop, session.line_count)
    lines = session.lines
    data: list[int] = []
    prev_line = 0
    prev_start = 0
    for line_no, spans in session.tokenize_range(start, stop, margin):
        if not start <= line_no < stop:
            continue
        line = lines[line_no]
        for span in spans:
            if span.category is Category.NONE:
                continue
            col = _utf16_offset(line, span.start)
            length = _utf16_offset(line, span.end) - col
            delta_line = line_no - prev_line
            delta_start = col - prev_start if delta_line == 0 else col
            data.extend([delta_line, delta_start, length, _TYPE_INDEX[span.category], 0])
            prev_line = line_no
            prev_start = col
    return data


def _session_for(ls: LanguageServer, uri: str) -> BufferSession:
    doc = ls.workspace.get_text_document(uri)
    return store.update(uri, doc.source, doc.language_id)


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    item = params.text_document
    store.open(item.uri, item.text, item.language_id)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _session_for(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: LanguageServer, params: DidCloseTextDocumentParams) -> None:
    store.close(params.text_document.uri)


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL, LEGEND)
def semantic_tokens_full(ls: LanguageServer, params: SemanticTokensParams) -> SemanticTokens:
    session = _session_for(ls, params.text_document.uri)
    return SemanticTokens(data=encode_semantic_tokens(session))


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_RANGE, LEGEND)
def semantic_tokens_range(ls: LanguageServer, params: SemanticTokensRangeParams) -> SemanticTokens:
    session = _session_for(ls, params.text_document.uri)
    start = params.range.start.line
    stop = params.range.end.line + 1
    return SemanticTokens(data=encode_semantic_tokens(session, start, stop, RANGE_MARGIN))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="retrolex-lsp", description="retrolex language server")
    p.add_argument("--platform", default=DEFAULT_PLATFORM, help="Project platform (c64, coco)")
    args = p.parse_args(argv)
    try:
        store.platform = resolve_platform(args.platform)
    except UnknownPlatform as exc:
        print(str(exc), file=sys.stderr)
        return 2
    server.start_io()
    return 0
